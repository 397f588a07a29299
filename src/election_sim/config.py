# election_sim/config.py
# Central place for constants; each one can be overridden from the environment

import os

# Label prepended by the reference tally obfuscator
OBFUSCATION_PREFIX = os.getenv("ELECTION_OBFUSCATION_PREFIX", "encrypted_")

LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# --- HTTP front end ---
HOST = os.getenv("ELECTION_HOST", "127.0.0.1")
PORT = int(os.getenv("ELECTION_PORT", "5000"))

# --- CLI ---
BASE_URL = os.getenv("ELECTION_BASE_URL", f"http://{HOST}:{PORT}")
REQUEST_TIMEOUT = float(os.getenv("ELECTION_REQUEST_TIMEOUT", "2"))
