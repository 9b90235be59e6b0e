# nfw_backup
# Lambda that backs up AWS Network Firewall stateful rule groups to S3.
