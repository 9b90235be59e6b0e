# errors.py
# Exceptions raised by the rule group backup.


class BackupError(Exception):
    pass


class ConfigError(BackupError, ValueError):
    """Bad or missing configuration, or no AWS credentials. Fatal."""


class ListFailure(BackupError):
    """A list_rule_groups page request failed. Fatal."""


class DescribeFailure(BackupError):
    """describe_rule_group failed for one rule group."""


class UploadFailure(BackupError):
    """put_object failed for one backup file."""
