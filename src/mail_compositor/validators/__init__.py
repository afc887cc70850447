"""Validation of caller-supplied manifests and filenames."""

from .manifest_validator import ManifestValidator, validate_filename, validate_manifest

__all__ = ["ManifestValidator", "validate_filename", "validate_manifest"]
