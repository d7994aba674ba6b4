"""Default values for service and collaborators."""

# Minimum label confidence (percent) for an image to count as containing a cat
DEFAULT_CONFIDENCE_THRESHOLD = 50.0

DEFAULT_STATE_FILE = "catpoint-state.yaml"
DEFAULT_CONFIG_FILE = "config.yaml"

DEFAULT_AWS_REGION = "us-east-1"
REKOGNITION_MAX_LABELS = 10
CAT_LABEL = "cat"
