"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Validator ---
# "forbid" rejects rule additions once a result is cached, "invalidate" drops the cache.
VALIDATOR_POST_EVALUATION_POLICY: str = os.getenv("VALIDATOR_POST_EVALUATION_POLICY", "forbid")

# --- Observability ---
VALIDATOR_METRICS_ENABLED: bool = os.getenv("VALIDATOR_METRICS_ENABLED", "true").lower() == "true"
