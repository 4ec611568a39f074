# src/consts.py

# Logging format selectors
LOCAL_LOGGING = "LOCAL"
REMOTE_LOGGING = "REMOTE"

# Environment variables that override setup_logger arguments
ENABLE_DEBUG_LOG = "BD_ENABLE_DEBUG_LOG"
ENABLE_LOCAL_LOG = "BD_ENABLE_LOCAL_LOG"
ENABLE_REMOTE_LOG = "BD_ENABLE_REMOTE_LOG"
LOCAL_LOG_MIN_SEVERITY = "BD_LOCAL_LOG_SEVERITY"
REMOTE_LOG_MIN_SEVERITY = "BD_REMOTE_LOG_SEVERITY"
LOGGING_FORMAT_ENV = "BD_LOGGING_FORMAT"

# Directory configuration
DATABASE_URL_ENV = "BUSINESS_DIRECTORY_DATABASE_URL"
PARALLEL_READS_ENV = "BUSINESS_DIRECTORY_PARALLEL_READS"
SKIP_EMPTY_TAGS_ENV = "BUSINESS_DIRECTORY_SKIP_EMPTY_TAGS"

# Default logger name and log file base name
APP_NAME = "business_directory"
