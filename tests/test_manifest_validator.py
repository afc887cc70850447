"""Tests for manifest and filename validation."""

import pytest

from mail_compositor.config import CompositorConfig
from mail_compositor.exceptions import ValidationError
from mail_compositor.validators import (
    ManifestValidator,
    validate_filename,
    validate_manifest,
)
from mail_compositor.validators.manifest_validator import coerce_int, name_errors
from schemas.manifest import AttachmentInfo, Manifest


class TestCoerceInt:
    """Tests for coerce_int()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(3, 3), (0, 0), (-2, -2), (4.0, 4), ("7", 7), (" 2 ", 2)],
    )
    def test_accepts_integers(self, value, expected):
        assert coerce_int(value) == expected

    @pytest.mark.parametrize("value", [True, 2.5, "two", "", None, [1]])
    def test_rejects_non_integers(self, value):
        assert coerce_int(value) is None


class TestNameErrors:
    """Tests for name_errors()."""

    def test_plain_name_ok(self):
        assert name_errors("report.pdf") == []

    def test_dots_inside_name_ok(self):
        """Names such as "v1..2.pdf" are not path traversal."""
        assert name_errors("v1..2.pdf") == []

    @pytest.mark.parametrize("name", ["../etc.pdf", "a/b.pdf", "a\\b.pdf", ".."])
    def test_traversal_rejected(self, name):
        assert name_errors(name)

    @pytest.mark.parametrize("name", ["a|b.pdf", "a<b.pdf", 'a"b.pdf', "a?.pdf", "a*.pdf", "c:x.pdf"])
    def test_reserved_characters_rejected(self, name):
        assert name_errors(name)

    @pytest.mark.parametrize("name", ["", "   ", None, 12])
    def test_empty_or_non_string_rejected(self, name):
        assert name_errors(name) == ["must be a non-empty string"]


class TestValidateFilename:
    """Tests for validate_filename()."""

    def test_valid(self):
        assert validate_filename("x_merged.pdf") == "x_merged.pdf"

    def test_uppercase_extension(self):
        assert validate_filename("X.PDF") == "X.PDF"

    def test_not_pdf(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_filename("notes.txt")
        assert exc_info.value.errors == ["must end with .pdf"]

    def test_traversal(self):
        with pytest.raises(ValidationError):
            validate_filename("../secret.pdf")


class TestManifestValidator:
    """Tests for ManifestValidator.validate()."""

    def test_transport_shape(self):
        """camelCase transport manifests are accepted."""
        manifest = ManifestValidator().validate(
            {
                "emailPageCount": 1,
                "attachmentInfo": [
                    {"originalName": "a.pdf", "pageCount": 2},
                    {"originalName": "b.pdf", "pageCount": 3},
                ],
            }
        )

        assert manifest.email_page_count == 1
        assert manifest.attachment_info == [
            AttachmentInfo(original_name="a.pdf", page_count=2),
            AttachmentInfo(original_name="b.pdf", page_count=3),
        ]

    def test_snake_case_keys(self):
        manifest = ManifestValidator().validate(
            {"email_page_count": 2, "attachment_info": [{"original_name": "a.pdf", "page_count": 1}]}
        )

        assert manifest.email_page_count == 2
        assert manifest.attachment_info[0].original_name == "a.pdf"

    def test_manifest_passthrough(self):
        manifest = Manifest(email_page_count=3)

        assert ManifestValidator().validate(manifest) is manifest

    def test_manifest_model_names_checked(self):
        """A Manifest model gets the same name rules as the transport shape."""
        manifest = Manifest(
            email_page_count=1,
            attachment_info=[AttachmentInfo(original_name="a|b.pdf", page_count=2)],
        )

        with pytest.raises(ValidationError) as exc_info:
            ManifestValidator().validate(manifest)
        assert "attachmentInfo[0].originalName" in exc_info.value.errors[0]

    def test_manifest_model_traversal_rejected(self):
        manifest = Manifest(
            email_page_count=1,
            attachment_info=[AttachmentInfo(original_name="../x.pdf", page_count=1)],
        )

        with pytest.raises(ValidationError):
            ManifestValidator().validate(manifest)

    def test_none_means_defaults(self):
        """None yields the default email page count and auto-detection."""
        manifest = ManifestValidator().validate(None)

        assert manifest.email_page_count == 1
        assert manifest.is_auto_detect

    def test_default_email_count_from_config(self):
        config = CompositorConfig({"default_email_page_count": 2})

        assert ManifestValidator(config).validate({}).email_page_count == 2

    def test_zero_email_pages_allowed(self):
        assert ManifestValidator().validate({"emailPageCount": 0}).email_page_count == 0

    def test_negative_email_count_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ManifestValidator().validate({"emailPageCount": -1})
        assert "must not be negative" in exc_info.value.errors[0]

    def test_non_numeric_email_count_rejected(self):
        with pytest.raises(ValidationError):
            ManifestValidator().validate({"emailPageCount": "one"})

    def test_numeric_string_email_count_accepted(self):
        assert ManifestValidator().validate({"emailPageCount": "2"}).email_page_count == 2

    def test_invalid_page_count_coerced_to_one(self):
        """pageCount -1, 0, missing, or junk become 1 instead of failing."""
        manifest = ManifestValidator().validate(
            {
                "emailPageCount": 1,
                "attachmentInfo": [
                    {"originalName": "a.pdf", "pageCount": -1},
                    {"originalName": "b.pdf", "pageCount": 0},
                    {"originalName": "c.pdf"},
                    {"originalName": "d.pdf", "pageCount": "many"},
                ],
            }
        )

        assert [a.page_count for a in manifest.attachment_info] == [1, 1, 1, 1]

    def test_reserved_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ManifestValidator().validate(
                {"attachmentInfo": [{"originalName": "a|b.pdf", "pageCount": 1}]}
            )
        assert "attachmentInfo[0].originalName" in exc_info.value.errors[0]

    def test_traversal_name_rejected(self):
        with pytest.raises(ValidationError):
            ManifestValidator().validate(
                {"attachmentInfo": [{"originalName": "../../evil.pdf", "pageCount": 1}]}
            )

    def test_explicit_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ManifestValidator().validate({"attachmentInfo": [{"originalName": "", "pageCount": 1}]})

    def test_missing_name_uses_placeholder(self):
        manifest = ManifestValidator().validate({"attachmentInfo": [{"pageCount": 2}]})

        assert manifest.attachment_info[0].original_name == "attachment.pdf"

    def test_errors_are_collected(self):
        """Every rejecting rule is reported, not just the first."""
        with pytest.raises(ValidationError) as exc_info:
            ManifestValidator().validate(
                {
                    "emailPageCount": -3,
                    "attachmentInfo": [{"originalName": "a*b.pdf"}, "nope"],
                }
            )
        assert len(exc_info.value.errors) == 3

    def test_attachment_info_must_be_list(self):
        with pytest.raises(ValidationError):
            ManifestValidator().validate({"attachmentInfo": "a.pdf"})

    def test_manifest_must_be_mapping(self):
        with pytest.raises(ValidationError):
            ManifestValidator().validate(["a.pdf"])

    def test_empty_attachment_info_selects_auto_detect(self):
        manifest = ManifestValidator().validate({"emailPageCount": 1, "attachmentInfo": []})

        assert manifest.is_auto_detect


def test_validate_manifest_shortcut():
    """validate_manifest() validates with a default validator."""
    manifest = validate_manifest({"emailPageCount": 2})

    assert manifest.email_page_count == 2
