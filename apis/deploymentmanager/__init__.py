"""Deployment Manager API client."""

from apis.deploymentmanager.client import DeploymentManagerClient
from apis.deploymentmanager.schemas import SCHEMAS, Deployment, Manifest, Operation, Policy, Resource

__all__ = [
    "DeploymentManagerClient",
    "SCHEMAS",
    "Deployment",
    "Manifest",
    "Operation",
    "Policy",
    "Resource",
]
