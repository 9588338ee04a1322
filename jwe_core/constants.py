# jwe_core/constants.py

# Reserved header parameters every recipient must resolve
HEADER_ALG = "alg"
HEADER_ENC = "enc"

COMPACT_SEPARATOR = "."
COMPACT_PARTS = 5

# JSON serialization members, in emission order
FIELD_PROTECTED = "protected"
FIELD_UNPROTECTED = "unprotected"
FIELD_HEADER = "header"
FIELD_RECIPIENTS = "recipients"
FIELD_AAD = "aad"
FIELD_ENCRYPTED_KEY = "encrypted_key"
FIELD_IV = "iv"
FIELD_CIPHERTEXT = "ciphertext"
FIELD_TAG = "tag"

FULL_FIELD_ORDER = (
    FIELD_PROTECTED,
    FIELD_UNPROTECTED,
    FIELD_HEADER,
    FIELD_RECIPIENTS,
    FIELD_AAD,
    FIELD_ENCRYPTED_KEY,
    FIELD_IV,
    FIELD_CIPHERTEXT,
    FIELD_TAG,
)

ENV_LOG_LEVEL = "JWE_LOG_LEVEL"
ENV_MAX_INPUT_LENGTH = "JWE_MAX_INPUT_LENGTH"
ENV_LOG_FILE = "JWE_LOG_FILE"

LOGGER_ROOT = "JWE"
