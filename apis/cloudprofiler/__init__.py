"""Cloud Profiler API client."""

from apis.cloudprofiler.client import CloudProfilerClient
from apis.cloudprofiler.schemas import SCHEMAS, Deployment, Profile, ProfileType

__all__ = ["CloudProfilerClient", "SCHEMAS", "Deployment", "Profile", "ProfileType"]
