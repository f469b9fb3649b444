from parceltrack.models.parcel import Parcel

SAMPLE_PARCELS = [
    {
        "id": "1",
        "trackingNumber": "TRK001234567",
        "status": "in_transit",
        "currentLocation": "Distribution Center - New York",
        "estimatedDelivery": "2025-01-25",
        "recipient": {
            "name": "John Smith",
            "address": "123 Main St, Boston, MA 02101",
            "phone": "+1-555-0123",
            "email": "john.smith@email.com",
        },
        "sender": {"name": "ABC Electronics", "address": "456 Industrial Blvd, Newark, NJ 07102"},
        "weight": 2.5,
        "dimensions": "12x8x6 inches",
        "createdAt": "2025-01-20T10:00:00Z",
        "updatedAt": "2025-01-23T14:30:00Z",
        "statusHistory": [
            {"status": "pending", "location": "Warehouse - Newark", "timestamp": "2025-01-20T10:00:00Z", "notes": "Package received and processed"},
            {"status": "in_transit", "location": "Distribution Center - New York", "timestamp": "2025-01-23T14:30:00Z", "notes": "In transit to destination"},
        ],
        "priority": "medium",
        "serviceType": "standard",
    },
    {
        "id": "2",
        "trackingNumber": "TRK001234568",
        "status": "delivered",
        "currentLocation": "Delivered - Customer Address",
        "estimatedDelivery": "2025-01-22",
        "actualDelivery": "2025-01-22",
        "recipient": {
            "name": "Sarah Johnson",
            "address": "789 Oak Ave, Chicago, IL 60601",
            "phone": "+1-555-0124",
            "email": "sarah.johnson@email.com",
        },
        "sender": {"name": "Fashion Hub", "address": "321 Fashion St, Los Angeles, CA 90210"},
        "weight": 1.2,
        "dimensions": "10x8x4 inches",
        "createdAt": "2025-01-18T09:15:00Z",
        "updatedAt": "2025-01-22T16:45:00Z",
        "statusHistory": [
            {"status": "pending", "location": "Warehouse - Los Angeles", "timestamp": "2025-01-18T09:15:00Z"},
            {"status": "in_transit", "location": "Hub - Denver", "timestamp": "2025-01-20T12:00:00Z"},
            {"status": "out_for_delivery", "location": "Local Facility - Chicago", "timestamp": "2025-01-22T08:00:00Z"},
            {"status": "delivered", "location": "Customer Address", "timestamp": "2025-01-22T16:45:00Z", "notes": "Delivered to customer"},
        ],
        "priority": "high",
        "serviceType": "express",
    },
    {
        "id": "3",
        "trackingNumber": "TRK001234569",
        "status": "delayed",
        "currentLocation": "Sorting Facility - Dallas",
        "estimatedDelivery": "2025-01-24",
        "recipient": {
            "name": "Mike Wilson",
            "address": "456 Pine St, Houston, TX 77001",
            "phone": "+1-555-0125",
            "email": "mike.wilson@email.com",
        },
        "sender": {"name": "Tech Solutions Inc", "address": "654 Tech Park, Austin, TX 78701"},
        "weight": 5.8,
        "dimensions": "16x12x10 inches",
        "createdAt": "2025-01-19T11:30:00Z",
        "updatedAt": "2025-01-24T09:15:00Z",
        "statusHistory": [
            {"status": "pending", "location": "Warehouse - Austin", "timestamp": "2025-01-19T11:30:00Z"},
            {"status": "in_transit", "location": "Hub - Dallas", "timestamp": "2025-01-21T14:20:00Z"},
            {"status": "delayed", "location": "Sorting Facility - Dallas", "timestamp": "2025-01-24T09:15:00Z", "notes": "Delayed due to weather conditions"},
        ],
        "priority": "high",
        "serviceType": "overnight",
    },
    {
        "id": "4",
        "trackingNumber": "TRK001234570",
        "status": "out_for_delivery",
        "currentLocation": "Local Facility - Miami",
        "estimatedDelivery": "2025-01-23",
        "recipient": {
            "name": "Lisa Brown",
            "address": "789 Beach Blvd, Miami, FL 33101",
            "phone": "+1-555-0126",
            "email": "lisa.brown@email.com",
        },
        "sender": {"name": "Medical Supplies Co", "address": "321 Health St, Orlando, FL 32801"},
        "weight": 0.8,
        "dimensions": "8x6x4 inches",
        "createdAt": "2025-01-21T08:00:00Z",
        "updatedAt": "2025-01-23T11:20:00Z",
        "statusHistory": [
            {"status": "pending", "location": "Warehouse - Orlando", "timestamp": "2025-01-21T08:00:00Z"},
            {"status": "in_transit", "location": "Hub - Tampa", "timestamp": "2025-01-22T14:00:00Z"},
            {"status": "out_for_delivery", "location": "Local Facility - Miami", "timestamp": "2025-01-23T11:20:00Z", "notes": "Out for delivery"},
        ],
        "priority": "high",
        "serviceType": "overnight",
    },
    {
        "id": "5",
        "trackingNumber": "TRK001234571",
        "status": "pending",
        "currentLocation": "Warehouse - Seattle",
        "estimatedDelivery": "2025-01-27",
        "recipient": {
            "name": "David Kim",
            "address": "456 Tech Ave, San Francisco, CA 94102",
            "phone": "+1-555-0127",
            "email": "david.kim@email.com",
        },
        "sender": {"name": "Books & More", "address": "123 Library St, Portland, OR 97201"},
        "weight": 1.5,
        "dimensions": "10x7x3 inches",
        "createdAt": "2025-01-22T16:00:00Z",
        "updatedAt": "2025-01-22T16:00:00Z",
        "statusHistory": [
            {"status": "pending", "location": "Warehouse - Seattle", "timestamp": "2025-01-22T16:00:00Z", "notes": "Package received and pending processing"},
        ],
        "priority": "low",
        "serviceType": "standard",
    },
]


def sample_parcels() -> list[Parcel]:
    return [Parcel.model_validate(data) for data in SAMPLE_PARCELS]
