"""
Unit Tests for Export Configuration

Tests for CopyConfig parsing, defaults and self-correction.
"""

import json
import pytest
from dataclasses import replace
from pathlib import Path

from exam_latex_toolkit.core.models import QuestionType
from exam_latex_toolkit.exporter.config import (
    A4_GEOMETRY,
    B5_GEOMETRY,
    DEFAULT_COPY_CONFIG,
    CopyConfig,
    CopyMethod,
    ExportMode,
    NormalConfig,
    PaperSize,
    SelectiveCopyOptions,
    VspaceAmount,
    load_copy_config,
)


class TestEnums:
    """Tests for aliased enum parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("rich", ExportMode.RICH),
        ("mareate", ExportMode.RICH),
        ("normal", ExportMode.MINIMAL),
        ("MINIMAL", ExportMode.MINIMAL),
    ])
    def test_mode_parse_when_alias_then_member(self, raw, expected):
        assert ExportMode.parse(raw) is expected

    def test_method_parse_when_overleaf_then_remote_submit(self):
        assert CopyMethod.parse("overleaf") is CopyMethod.REMOTE_SUBMIT

    def test_parse_when_unknown_then_raises(self):
        with pytest.raises(ValueError, match="Invalid PaperSize"):
            PaperSize.parse("Letter")


class TestDefaults:
    """Default configuration mirrors the UI defaults."""

    def test_default_when_constructed_then_rich_clipboard_a4(self):
        config = DEFAULT_COPY_CONFIG

        assert config.mode is ExportMode.RICH
        assert config.add_vspace is True
        assert config.copy_method is CopyMethod.CLIPBOARD
        assert config.normal_config.add_document_environment is False
        assert config.normal_config.paper_size is PaperSize.A4

    @pytest.mark.parametrize("qtype,expected", [
        (QuestionType.CHOICE, "\\vspace{3cm}"),
        (QuestionType.MULTIPLE_CHOICE, "\\vspace{3cm}"),
        (QuestionType.FILL, "\\vspace{3cm}"),
        (QuestionType.SOLUTION, "\\vspace{5cm}"),
        (QuestionType.OTHER, "\\vspace{3cm}"),
    ])
    def test_vspace_for_when_enabled_then_per_type(self, qtype, expected):
        assert DEFAULT_COPY_CONFIG.vspace_for(qtype) == expected

    def test_vspace_for_when_disabled_then_empty(self):
        config = CopyConfig(add_vspace=False)

        assert config.vspace_for(QuestionType.SOLUTION) == ""

    def test_vspace_for_when_custom_amount_then_used(self):
        config = CopyConfig(vspace_amount=VspaceAmount(choice="\\vspace{1cm}"))

        assert config.vspace_for(QuestionType.CHOICE) == "\\vspace{1cm}"
        assert config.vspace_for(QuestionType.FILL) == "\\vspace{3cm}"


class TestGeometry:
    """Tests for NormalConfig.geometry."""

    def test_geometry_when_b5_then_b5_preset(self):
        assert NormalConfig(paper_size=PaperSize.B5).geometry == B5_GEOMETRY

    def test_geometry_when_custom_then_verbatim(self):
        normal = NormalConfig(paper_size=PaperSize.CUSTOM, custom_geometry="margin=1in")

        assert normal.geometry == "margin=1in"

    def test_geometry_when_custom_has_surrounding_whitespace_then_kept(self):
        """Only the emptiness check ignores whitespace."""
        normal = NormalConfig(paper_size=PaperSize.CUSTOM, custom_geometry=" margin=1in\n")

        assert normal.geometry == " margin=1in\n"

    def test_geometry_when_custom_empty_then_a4(self):
        normal = NormalConfig(paper_size=PaperSize.CUSTOM, custom_geometry="  ")

        assert normal.geometry == A4_GEOMETRY

    def test_geometry_when_unset_then_a4(self):
        assert NormalConfig(paper_size=None).geometry == A4_GEOMETRY


class TestEffective:
    """Tests for the remote-submit self-correction."""

    def test_effective_when_clipboard_then_unchanged(self):
        config = CopyConfig(mode=ExportMode.MINIMAL)

        assert config.effective() is config

    def test_effective_when_remote_submit_then_document_forced(self):
        """Remote submission always produces a full document on A4 by default."""
        # Arrange
        config = CopyConfig(
            mode=ExportMode.MINIMAL,
            copy_method=CopyMethod.REMOTE_SUBMIT,
            normal_config=NormalConfig(add_document_environment=False, paper_size=None),
        )

        # Act
        effective = config.effective()

        # Assert
        assert effective.normal_config.add_document_environment is True
        assert effective.normal_config.paper_size is PaperSize.A4
        assert effective.copy_method is CopyMethod.REMOTE_SUBMIT

    def test_effective_when_remote_submit_then_keeps_chosen_size(self):
        config = CopyConfig(
            copy_method=CopyMethod.REMOTE_SUBMIT,
            normal_config=NormalConfig(paper_size=PaperSize.B5),
        )

        assert config.effective().normal_config.paper_size is PaperSize.B5

    def test_effective_when_applied_twice_then_same(self):
        config = CopyConfig(copy_method=CopyMethod.REMOTE_SUBMIT)

        assert config.effective().effective() == config.effective()


class TestFromDict:
    """Tests for CopyConfig.from_dict / load_copy_config."""

    def test_from_dict_when_ui_payload_then_parsed(self):
        """The UI's camelCase shape and legacy spellings are accepted."""
        data = {
            "mode": "normal",
            "addVspace": False,
            "vspaceAmount": {"solution": "\\vspace{8cm}"},
            "copyMethod": "overleaf",
            "normalConfig": {"addDocumentEnvironment": True, "paperSize": "B5"},
        }

        config = CopyConfig.from_dict(data)

        assert config.mode is ExportMode.MINIMAL
        assert config.add_vspace is False
        assert config.vspace_amount.solution == "\\vspace{8cm}"
        assert config.vspace_amount.choice == "\\vspace{3cm}"
        assert config.copy_method is CopyMethod.REMOTE_SUBMIT
        assert config.normal_config.paper_size is PaperSize.B5

    def test_from_dict_when_empty_then_defaults(self):
        assert CopyConfig.from_dict({}) == DEFAULT_COPY_CONFIG

    def test_to_dict_when_round_tripped_then_equal(self):
        config = replace(DEFAULT_COPY_CONFIG, mode=ExportMode.MINIMAL)

        assert CopyConfig.from_dict(config.to_dict()) == config

    def test_from_dict_when_bad_mode_then_raises(self):
        with pytest.raises(ValueError, match="Invalid ExportMode"):
            CopyConfig.from_dict({"mode": "fancy"})

    def test_constructor_when_mode_is_string_then_raises(self):
        with pytest.raises(ValueError, match="mode must be an ExportMode"):
            CopyConfig(mode="rich")  # type: ignore[arg-type]

    def test_load_when_file_then_parsed(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"mode": "minimal"}), encoding="utf-8")

        assert load_copy_config(path).mode is ExportMode.MINIMAL

    def test_load_when_invalid_json_then_raises_value_error(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_copy_config(path)


class TestSelectiveCopyOptions:
    """Tests for SelectiveCopyOptions."""

    def test_defaults_when_constructed_then_answers_hidden(self):
        options = SelectiveCopyOptions()

        assert options.show_difficulty and options.show_source
        assert not options.show_answer

    def test_from_dict_when_camel_case_then_parsed(self):
        options = SelectiveCopyOptions.from_dict({"showAnswer": True, "showSource": False})

        assert options.show_answer
        assert not options.show_source
