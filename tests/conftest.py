import pytest

from nfw_backup.config import BackupConfig
from tests.fakes import FIXED_TIME


@pytest.fixture()
def config():
    return BackupConfig(bucket_name="network-firewall-backups-00000",
                        bucket_folder="suricata_backups", region="us-west-1")


@pytest.fixture()
def clock():
    return lambda: FIXED_TIME


@pytest.fixture()
def backup_env(monkeypatch):
    monkeypatch.setenv("BUCKET_NAME", "network-firewall-backups-00000")
    monkeypatch.setenv("BUCKET_FOLDER", "suricata_backups")
    monkeypatch.setenv("REGION", "us-west-1")
    monkeypatch.delenv("METRIC_NAMESPACE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
