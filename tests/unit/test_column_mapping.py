"""
Unit tests for column mapping resolvers.
"""

import pytest

from clickstories.domain_core.exceptions import PanelSourceError
from clickstories.infra.readers.column_mapping import (
    PromptMappingResolver,
    StaticMappingResolver,
    normalize_header,
)

REQUIRED = ("name", "takeaway", "vizType", "viz")
OPTIONAL = ("text", "alt", "vizSpace")


class TestStaticMappingResolver:
    def test_identity_mapping(self):
        """Test columns named like the fields map to themselves."""
        columns = ["name", "takeaway", "text", "vizType", "viz", "alt"]
        mapping = StaticMappingResolver().resolve_mapping(REQUIRED, columns, optional_fields=OPTIONAL)
        assert mapping == {
            "name": "name",
            "takeaway": "takeaway",
            "vizType": "vizType",
            "viz": "viz",
            "text": "text",
            "alt": "alt",
        }

    def test_explicit_mapping(self):
        """Test explicit mappings win."""
        columns = ["panel_name", "main_takeaway", "vizualization_type", "visualization", "alt_text"]
        mapping = StaticMappingResolver().resolve_mapping(
            REQUIRED,
            columns,
            {
                "name": "panel_name",
                "takeaway": "main_takeaway",
                "vizType": "vizualization_type",
                "viz": "visualization",
                "alt": "alt_text",
            },
            optional_fields=OPTIONAL,
        )
        assert mapping["vizType"] == "vizualization_type"
        assert mapping["alt"] == "alt_text"
        assert "text" not in mapping

    def test_loose_header_matching(self):
        """Test case, spaces, underscores and hyphens are ignored."""
        columns = ["Name", "Takeaway", "Viz Type", "VIZ", "viz_space"]
        mapping = StaticMappingResolver().resolve_mapping(REQUIRED, columns, optional_fields=OPTIONAL)
        assert mapping["vizType"] == "Viz Type"
        assert mapping["viz"] == "VIZ"
        assert mapping["vizSpace"] == "viz_space"

    def test_missing_required_column_raises_error(self):
        """Test unmatched required fields are reported."""
        with pytest.raises(PanelSourceError, match="vizType, viz"):
            StaticMappingResolver().resolve_mapping(REQUIRED, ["name", "takeaway"])

    def test_normalize_header(self):
        assert normalize_header(" Viz-Type ") == "viztype"
        assert normalize_header("viz_type") == normalize_header("vizType")


class TestPromptMappingResolver:
    def test_prompts_for_unmatched_fields(self):
        """Test the user is asked for columns that cannot be matched."""
        answers = iter(["vis_type", "vis_content"])
        asked = []

        def prompt(message):
            asked.append(message)
            return next(answers)

        resolver = PromptMappingResolver(prompt=prompt)
        mapping = resolver.resolve_mapping(REQUIRED, ["name", "takeaway", "vis_type", "vis_content"])

        assert mapping["vizType"] == "vis_type"
        assert mapping["viz"] == "vis_content"
        assert asked == [
            "Please provide the column name for 'vizType': ",
            "Please provide the column name for 'viz': ",
        ]

    def test_gives_up_after_max_attempts(self):
        """Test wrong answers eventually raise an error."""
        resolver = PromptMappingResolver(prompt=lambda _: "nope", max_attempts=2)
        with pytest.raises(PanelSourceError, match="viz"):
            resolver.resolve_mapping(REQUIRED, ["name", "takeaway", "vizType"])

    def test_does_not_prompt_when_everything_matches(self):
        """Test no prompt is shown for a complete file."""
        def prompt(_):
            raise AssertionError("should not prompt")

        mapping = PromptMappingResolver(prompt=prompt).resolve_mapping(
            REQUIRED, ["name", "takeaway", "vizType", "viz"]
        )
        assert set(mapping) == set(REQUIRED)
