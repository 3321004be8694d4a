class AppStatusCode:
    # success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"
    DELETED_SUCCESSFULLY = "103"
    OPERATION_SUCCESSFUL = "104"

    # generic failures
    OPERATION_FAILED = "200"
    OPERATION_ERROR = "201"
    INVALID_INPUT = "202"
    REQUIRED_VALIDATION_ERROR = "203"
    DUPLICATE_ADD_ERROR = "204"
    RECORD_NOT_FOUND = "205"

    # authentication
    AUTHENTICATION_USER_INVALID = "300"
    AUTHENTICATION_TOKEN_INVALID = "301"
    AUTHENTICATION_TOKEN_EXPIRED = "302"
    AUTHENTICATION_SESSION_TIMEOUT = "303"
    AUTHENTICATION_CREDENTIALS_INVALID = "304"
    AUTHENTICATION_USER_INACTIVE = "305"
    AUTHENTICATION_UNAUTHORIZED_ACCESS = "306"
    AUTHENTICATION_PASSWORD_WEAK = "307"
    AUTHENTICATION_RESET_TOKEN_INVALID = "308"
    UNAUTHORIZED_ACTION = "309"
    USER_USERNAME_IS_UNIQUE = "310"

    # warehouse domain
    INVENTORY_QUANTITY_EXCEEDS_TOTAL = "400"
    INVENTORY_INSUFFICIENT_STOCK = "401"
    ORDER_ITEMS_REQUIRED = "402"
    ORDER_QUANTITY_EXCEEDS_AVAILABLE = "403"
    ORDER_ITEMS_WRITE_FAILED = "404"
    ORDER_NUMBER_GENERATION_FAILED = "405"
