"""Idempotent maintenance passes over example contracts and manifests."""

from .manifests import CROSS_ENV, PACKAGE_DEPS, ManifestPass, ManifestUpdater, dependency_pass
from .report import MaintenanceReport
from .rewrites import SOURCE_REWRITES, SourceRewrite, SourceRewriter

__all__ = [
    "CROSS_ENV",
    "MaintenanceReport",
    "ManifestPass",
    "ManifestUpdater",
    "PACKAGE_DEPS",
    "SOURCE_REWRITES",
    "SourceRewrite",
    "SourceRewriter",
    "dependency_pass",
]
