class DetectionFields:
    """MongoDB field names for detections collection"""

    MONGO_ID = "_id"

    ID = "id"
    DEPTH = "depth"
    SEVERITY = "severity"
    TIMESTAMP = "timestamp"

    LOCATION = "location"
    RAW = "raw"
    VEHICLE = "vehicle"
    SOURCE = "source"

    CREATED_AT = "created_at"
