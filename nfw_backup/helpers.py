# helpers.py
# Shared helpers: AWS client factory, S3 put, CloudWatch metric and backup naming.
import datetime
import time

import boto3

from nfw_backup.errors import ConfigError

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


class AwsClients:
    """Builds the service clients for one invocation from a single boto3 session.

    Credentials are resolved up front so a missing credential chain fails the
    run before any rule group is touched.
    """

    def __init__(self, region, session=None):
        self.session = session or boto3.session.Session(region_name=region)
        self.region = region
        if self.session.get_credentials() is None:
            raise ConfigError(f"No AWS credentials could be resolved for region {region}")

    def network_firewall(self):
        return self.session.client("network-firewall", region_name=self.region)

    def s3(self):
        return self.session.client("s3", region_name=self.region)

    def cloudwatch(self):
        return self.session.client("cloudwatch", region_name=self.region)


def put_s3_text(s3, bucket, key, text):
    """Write text to S3 as UTF-8. Returns s3://... path."""
    s3.put_object(Bucket=bucket, Key=key, Body=text.encode("utf-8"))
    return f"s3://{bucket}/{key}"


def push_metric(cloudwatch, namespace, name, value):
    """Publish a simple CloudWatch metric (Count)."""
    cloudwatch.put_metric_data(
        Namespace=namespace,
        MetricData=[{"MetricName": name, "Timestamp": int(time.time()), "Value": value, "Unit": "Count"}]
    )


def utc_now():
    return datetime.datetime.now(datetime.timezone.utc)


def backup_filename(rule_group_name, when):
    return f"{rule_group_name}_{when.strftime(TIMESTAMP_FORMAT)}.txt"


def backup_key(folder, filename):
    return f"{folder}/{filename}"
