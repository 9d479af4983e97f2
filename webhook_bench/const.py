"""Constants for Webhook Bench."""

# Default configuration values
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8000
DEFAULT_LOCAL_BASE_URL = "http://localhost:8000"
DEFAULT_DATABASE_URL = "sqlite:///./webhook_bench.db"
DEFAULT_DATABASE_POOL_SIZE = 5
DEFAULT_DATABASE_MAX_OVERFLOW = 10
DEFAULT_DOCUMENT_COLLECTION = "hi"
DEFAULT_DOCUMENT_ID = "664757f5fa35bada45c03725"
ENV_PREFIX = "WEBHOOK_BENCH_"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "uvicorn": "WARNING",
    "uvicorn.access": "WARNING",
    "fastapi": "WARNING",
    "httpx": "WARNING",
    "sqlalchemy.engine": "WARNING",
}

# HTTP status codes
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409
HTTP_ERROR = 500
HTTP_BAD_GATEWAY = 502

# Success modes for outbound requests
SUCCESS_MODE_STATUS = "status"
SUCCESS_MODE_OPAQUE = "opaque"

# Health check constants
HEALTH_STATUS_HEALTHY = "healthy"
HEALTH_STATUS_UNHEALTHY = "unhealthy"
HEALTH_STATUS_OK = "Ok"
HEALTH_STATUS_ERROR = "error"

# Local routes
HELLO_ROUTE = "/api/test"
READ_DB_ROUTE = "/api/readDB"
HELLO_MESSAGE = "Hello World"

# Document field holding the primary key
DOCUMENT_ID_FIELD = "_id"

# File and directory names
CONFIG_FILE_NAME = "config.json"

# FastAPI app constants
APP_TITLE = "Webhook Bench"
APP_DESCRIPTION = "Measures latency and throughput of webhook services and local API routes"
APP_VERSION = "0.1.0"
