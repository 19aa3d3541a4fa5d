# contentconv/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# Package log level used by setup_logging() when no explicit level is passed
LOG_LEVEL = os.getenv("CONTENTCONV_LOG_LEVEL", "INFO")
