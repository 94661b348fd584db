class SuccessMessages:
    CHECK_CREATE = "Check created successfully"
    CHECK_GET = "Got checks successfully"


class ErrorMessages:
    MONITOR_NOT_FOUND = "Monitor not found"
    DATA_ACCESS = "Failed to access check storage"
    INTERNAL = "Internal server error"
    INVALID_BODY = "body: Request body must be a JSON object"
    MONITOR_ID_MISMATCH = "monitorId: Must match the monitorId in the path"
