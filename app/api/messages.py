"""Client-facing response messages."""

USER_NOT_FOUND = "User not found"
ERROR_RETRIEVING_USERS = "Unable to retrieve users"
INVALID_LIMIT_PARAM = "Invalid limit parameter; must be a number"
INVALID_OFFSET_PARAM = "Invalid offset parameter; must be a number"
INVALID_ID_PARAM = "Invalid UUID parameter; must be a UUID"
ERROR_PARSING_JSON = "Unable to parse request body as JSON"
USER_CREATION_ERROR = "Unable to create user"
USER_UPDATE_ERROR = "Unable to update user"
USER_DELETE_ERROR = "Unable to delete user"
USER_DELETION_SUCCESS = "User successfully deleted"
INTERNAL_SERVER_ERROR = "An internal server error has occurred"
EMAIL_ALREADY_EXISTS = "Email already exists"
USERNAME_ALREADY_EXISTS = "Username already exists"
UNIQUE_CONSTRAINT_VIOLATION = "Unique constraint violation"

CONFLICT_MESSAGES = {
    "username": USERNAME_ALREADY_EXISTS,
    "email": EMAIL_ALREADY_EXISTS,
}
