"""Hosting environment adapters.

The resolver never detects its platform itself; callers pick the binding,
usually with ``select_binding(os.environ)``.
"""

from collections.abc import Mapping

from codegov.bindings.base import PlatformBinding, ServiceCredentials
from codegov.bindings.cloudfoundry import VCAP_APPLICATION, CloudFoundryBinding
from codegov.bindings.local import LocalBinding
from codegov.bindings.static import StaticBinding


def select_binding(environ: Mapping[str, str]) -> PlatformBinding:
    """Return the Cloud Foundry binding when VCAP_APPLICATION is set, else local."""
    if environ.get(VCAP_APPLICATION):
        return CloudFoundryBinding.from_environ(environ)
    return LocalBinding()


__all__ = [
    "PlatformBinding",
    "ServiceCredentials",
    "CloudFoundryBinding",
    "LocalBinding",
    "StaticBinding",
    "select_binding",
]
