# rule_backup.py
# Lambda to back up the Suricata rules of every Network Firewall rule group to S3.
# Handler: nfw_backup.rule_backup.lambda_handler
import logging
import os

from botocore.exceptions import BotoCoreError, ClientError

from nfw_backup.config import load_config
from nfw_backup.errors import DescribeFailure, UploadFailure
from nfw_backup.helpers import AwsClients, backup_filename, backup_key, push_metric, put_s3_text, utc_now
from nfw_backup.rule_groups import fetch_stateful_rules, list_rule_groups

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Backup completed successfully."


def upload_rules(s3, content, file_name, bucket_name, folder):
    key = backup_key(folder, file_name)
    logger.info("Uploading to S3 bucket %s, key: %s", bucket_name, key)
    try:
        path = put_s3_text(s3, bucket_name, key, content)
    except (ClientError, BotoCoreError) as e:
        logger.error("Error uploading file %s to S3: %s", file_name, e)
        raise UploadFailure(f"Uploading {key} to {bucket_name} failed: {e}") from e
    logger.info("Successfully uploaded file %s to S3.", file_name)
    return path


def publish_summary(cloudwatch, namespace, backed_up, skipped, failed):
    try:
        push_metric(cloudwatch, namespace, "RuleGroupsBackedUp", backed_up)
        push_metric(cloudwatch, namespace, "RuleGroupsSkipped", skipped)
        push_metric(cloudwatch, namespace, "RuleGroupUploadsFailed", failed)
    except (ClientError, BotoCoreError) as e:
        logger.warning("Could not publish backup metrics: %s", e)


def run_backup(config, network_firewall, s3, cloudwatch=None, now=utc_now):
    """Back up every rule group once.

    Listing errors propagate. A group whose describe call fails, that has no
    rules, or whose upload fails is logged and skipped; the run still returns
    SUCCESS_MESSAGE.
    """
    logger.info("Starting backup process...")
    rule_groups = list_rule_groups(network_firewall)

    backed_up = skipped = failed = 0
    for rg in rule_groups:
        logger.info("Processing rule group: %s", rg.name)
        try:
            rules = fetch_stateful_rules(network_firewall, rg.arn)
        except DescribeFailure:
            rules = ""
        if not rules:
            logger.info("Skipping rule group %s due to error or no rules.", rg.name)
            skipped += 1
            continue

        file_name = backup_filename(rg.name, now())
        try:
            upload_rules(s3, rules, file_name, config.bucket_name, config.bucket_folder)
            backed_up += 1
        except UploadFailure as e:
            logger.error("Failed to upload rules for %s: %s", rg.name, e)
            failed += 1

    if config.metric_namespace and cloudwatch is not None:
        publish_summary(cloudwatch, config.metric_namespace, backed_up, skipped, failed)

    logger.info("Backup process completed successfully.")
    return SUCCESS_MESSAGE


def lambda_handler(event, context, clients_factory=AwsClients):
    logging.getLogger().setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    if context is not None:
        logger.info("Invocation %s", getattr(context, "aws_request_id", "-"))

    logger.info("Loading configuration...")
    config = load_config()

    logger.info("Initializing AWS clients...")
    clients = clients_factory(config.region)
    network_firewall = clients.network_firewall()
    s3 = clients.s3()
    cloudwatch = clients.cloudwatch() if config.metric_namespace else None

    return run_backup(config, network_firewall, s3, cloudwatch=cloudwatch)


if __name__ == "__main__":
    logging.basicConfig(format="%(asctime)s %(levelname)s %(message)s", level=logging.INFO)
    print(lambda_handler({}, None))
