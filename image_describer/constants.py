"""All magic values live here — no inline literals anywhere else."""

# Provider endpoint
OPENAI_BASE_URL = "https://api.openai.com/v1"
OPENAI_VISION_MODEL = "gpt-4o"
VISION_MAX_TOKENS = 300

# Request body
IMAGE_MEDIA_TYPE = "image/jpeg"
DATA_URI_TEMPLATE = "data:%s;base64,%s"
MSG_IMAGE_DEFAULT_PROMPT = "Describe this image"

# Config
DEFAULT_LOG_LEVEL = "INFO"

# Log messages
MSG_SENDING_IMAGE = "Sending image for analysis (%d bytes, model=%s)"
MSG_RESPONSE_STATUS = "Response status code: %d"
MSG_REMOTE_ERROR = "Provider returned error: %s"
MSG_TRANSPORT_FAILURE = "Transport failure: %s"

# User-facing failure messages
MSG_MISSING_IMAGE = "No image data provided"
MSG_MALFORMED_RESPONSE = "Failed to parse response"

# CLI
MSG_PROCESSING = "Processing image..."
MSG_ERROR_PREFIX = "Error:"
