# Constants
SERVICE_NAME = "beacon-mcp"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3001
DEFAULT_CORS_ORIGIN = "*"
DEFAULT_LOG_LEVEL = "info"

HTTP_ENDPOINTS = ("/resource", "/tool", "/query")
