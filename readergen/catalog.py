"""AWS resources the Reader gives access to.

The order of this list is the order of the methods on the interface.
"""

from __future__ import annotations

from .descriptor import Descriptor

AWS_FUNCTIONS: list[Descriptor] = [
    Descriptor(
        entity="Instances",
        prefix="Describe",
        service="ec2",
        attribute_path="Reservations#Instances",
        documentation="GetInstances returns all EC2 instances based on the input given",
    ),
    Descriptor(
        entity="Vpcs",
        prefix="Describe",
        service="ec2",
        documentation="GetVpcs returns all EC2 VPCs based on the input given",
    ),
    Descriptor(
        entity="Subnets",
        prefix="Describe",
        service="ec2",
        documentation="GetSubnets returns all EC2 subnets based on the input given",
    ),
    Descriptor(
        entity="SecurityGroups",
        prefix="Describe",
        service="ec2",
        documentation="GetSecurityGroups returns all EC2 security groups based on the input given",
    ),
    Descriptor(
        entity="Images",
        prefix="Describe",
        service="ec2",
        filter_by_owner="Owners",
        no_pagination=True,
        documentation=(
            "GetOwnImages returns all EC2 AMI belonging to the Account ID based on the input given.\n"
            "The Owners filter is always set to the Account ID."
        ),
    ),
    Descriptor(
        entity="Snapshots",
        prefix="Describe",
        service="ec2",
        filter_by_owner="OwnerIds",
        documentation="GetOwnSnapshots returns all snapshots belonging to the Account ID",
    ),
    Descriptor(
        entity="Buckets",
        prefix="List",
        service="s3",
        no_pagination=True,
        documentation="GetBuckets returns all S3 buckets based on the input given",
    ),
    Descriptor(
        entity="BucketTags",
        prefix="Get",
        service="s3",
        service_entity="BucketTagging",
        output="s3.Tag",
        attribute_path="TagSet",
        no_pagination=True,
        documentation="GetBucketTags returns the tags of the S3 bucket given on the input",
    ),
    Descriptor(
        entity="DBInstances",
        prefix="Describe",
        service="rds",
        pagination_field="Marker",
        documentation="GetDBInstances returns all DB instances based on the input given",
    ),
    Descriptor(
        entity="CacheClusters",
        prefix="Describe",
        service="elasticache",
        pagination_field="Marker",
        documentation="GetCacheClusters returns all ElastiCache clusters based on the input given",
    ),
    Descriptor(
        entity="Policies",
        prefix="List",
        service="iam",
        pagination_field="Marker",
        documentation="GetPolicies returns all IAM policies based on the input given",
    ),
    Descriptor(
        entity="AccountPasswordPolicy",
        prefix="Get",
        service="iam",
        singular="PasswordPolicy",
        attribute_path="PasswordPolicy",
        single_result=True,
        no_pagination=True,
        documentation="GetAccountPasswordPolicy returns the IAM password policy of the account",
    ),
    Descriptor(
        entity="HostedZones",
        prefix="List",
        service="route53",
        pagination_field="NextMarker",
        input_pagination_field="Marker",
        documentation="GetHostedZones returns all Route53 hosted zones based on the input given",
    ),
    Descriptor(
        entity="ResourceRecordSets",
        signature="GetResourceRecordSets(ctx context.Context, input *route53.ListResourceRecordSetsInput) ([]*route53.ResourceRecordSet, error)",
        skip_body=True,
        documentation=(
            "GetResourceRecordSets returns all Route53 record sets of the hosted zone given.\n"
            "The pagination of this call uses several fields, so it's implemented by hand."
        ),
    ),
    Descriptor(
        entity="CloudFrontDistributions",
        prefix="List",
        service="cloudfront",
        service_entity="Distributions",
        output="cloudfront.DistributionSummary",
        attribute_path="DistributionList.Items",
        pagination_field="DistributionList.NextMarker",
        input_pagination_field="Marker",
        documentation="GetCloudFrontDistributions returns all CloudFront distributions based on the input given",
    ),
    Descriptor(
        entity="QueueAttributes",
        prefix="Get",
        service="sqs",
        output="string",
        attribute_path="Attributes",
        is_map=True,
        no_pagination=True,
        documentation="GetQueueAttributes returns the attributes of the SQS queue given on the input",
    ),
]
