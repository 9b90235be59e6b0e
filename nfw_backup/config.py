# config.py
# Deployment settings, read from the Lambda environment.
import os
from dataclasses import dataclass

from nfw_backup.errors import ConfigError

PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class BackupConfig:
    bucket_name: str
    bucket_folder: str
    region: str
    metric_namespace: str = None


def _is_unset(value):
    return not value or value.lower() == PLACEHOLDER


def load_config(environ=None):
    """Build a BackupConfig from environment variables.

    BUCKET_NAME, BUCKET_FOLDER and REGION must be set to real values.
    REGION falls back to AWS_REGION, which the Lambda runtime always sets.
    Raises ConfigError naming every variable that is missing.
    """
    env = os.environ if environ is None else environ
    bucket_name = (env.get("BUCKET_NAME") or "").strip()
    bucket_folder = (env.get("BUCKET_FOLDER") or "").strip().rstrip("/")
    region = (env.get("REGION") or env.get("AWS_REGION") or "").strip()

    missing = [name for name, value in (("BUCKET_NAME", bucket_name),
                                        ("BUCKET_FOLDER", bucket_folder),
                                        ("REGION", region)) if _is_unset(value)]
    if missing:
        raise ConfigError(f"{', '.join(missing)} must be set in environment variables")

    namespace = (env.get("METRIC_NAMESPACE") or "").strip() or None
    return BackupConfig(bucket_name=bucket_name, bucket_folder=bucket_folder,
                        region=region, metric_namespace=namespace)
