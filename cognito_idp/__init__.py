"""Mackerel agent plugin for AWS Cognito User Pool CloudWatch metrics."""

__version__ = "0.1.0"
