import os
import tempfile

# Keep log files of the test run out of the user's home directory.
os.environ.setdefault("OPUSBUILDER_LOG_DIR", tempfile.mkdtemp(prefix="opusbuilder-logs-"))
