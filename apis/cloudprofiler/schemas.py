"""Schemas and record shapes for the Cloud Profiler API (v2).

API Reference:
    https://cloud.google.com/profiler/docs/reference/v2/rest
"""

from typing import Literal, TypedDict

from coercion import SchemaRegistry, byte, duration, field_mask, message

ProfileType = Literal[
    "PROFILE_TYPE_UNSPECIFIED",
    "CPU",
    "WALL",
    "HEAP",
    "THREADS",
    "CONTENTION",
    "PEAK_HEAP",
    "HEAP_ALLOC",
]

SCHEMAS = SchemaRegistry("cloudprofiler", "v2")

SCHEMAS.define("Deployment")
SCHEMAS.define("CreateProfileRequest", {"deployment": message("Deployment")})
SCHEMAS.define("Profile", {
    "deployment": message("Deployment"),
    "duration": duration(),
    "profileBytes": byte(),
})
SCHEMAS.define("ProfilesPatchParams", {"updateMask": field_mask()})


class Deployment(TypedDict, total=False):
    """Deployment identification of a profiled workload.

    Attributes:
        projectId: Cloud project ID.
        target: Service name grouping related deployments.
        labels: Deployment labels, e.g. {'language': 'python', 'zone': 'us-central1-a'}.
    """

    projectId: str
    target: str
    labels: dict[str, str]


class Profile(TypedDict, total=False):
    """A profile resource.

    Attributes:
        name: Server-assigned resource name.
        profileType: Type of profile collected.
        deployment: Deployment this profile belongs to.
        duration: Profiling duration as a Duration string, e.g. '10s'.
        profileBytes: gzip-compressed serialized pprof proto.
        labels: Profile-specific labels merged with deployment labels.
    """

    name: str
    profileType: ProfileType
    deployment: Deployment
    duration: str
    profileBytes: bytes
    labels: dict[str, str]
