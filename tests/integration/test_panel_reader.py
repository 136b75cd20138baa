"""
Integration tests for reading panel tables from disk.
"""

import pandas as pd
import pytest

from clickstories.domain_core.exceptions import PanelSourceError, PanelValidationError
from clickstories.infra.readers.column_mapping import PromptMappingResolver
from clickstories.infra.readers.panel_reader import load_table, read_panels


def write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestReadPanels:
    def test_reads_csv(self, tmp_path):
        data_file = write_csv(
            tmp_path / "panels.csv",
            "name,takeaway,text,vizType,viz,vizSpace,alt\n"
            "p1,First takeaway,Some text,image-link,https://example.org/a.png,vertical,A chart\n"
            "p2,Second takeaway,,embed,https://example.org/embed,,\n",
        )

        panels = read_panels(data_file)

        assert [panel.name for panel in panels] == ["p1", "p2"]
        assert panels[0].viz_space == "vertical"
        assert panels[0].alt == "A chart"
        assert panels[1].text == ""
        assert panels[1].viz_space == ""

    def test_explicit_mapping_and_missing_optional_columns(self, tmp_path):
        """Test mapped columns are used and absent optional columns stay empty."""
        data_file = write_csv(
            tmp_path / "panels.csv",
            "panel_id,headline,vis_type,vis\n"
            "p1,Takeaway,image-link,https://example.org/a.png\n",
        )

        panels = read_panels(
            data_file,
            col_mapping={
                "name": "panel_id",
                "takeaway": "headline",
                "vizType": "vis_type",
                "viz": "vis",
            },
        )

        assert panels[0].name == "p1"
        assert panels[0].takeaway == "Takeaway"
        assert panels[0].text == ""
        assert panels[0].alt == ""

    def test_loose_headers(self, tmp_path):
        data_file = write_csv(
            tmp_path / "panels.csv",
            "Name,Takeaway,Viz Type,VIZ,viz_space\n"
            "p1,Takeaway,image,charts/a.png,similar\n",
        )

        panels = read_panels(data_file)

        assert panels[0].viz_type == "image"
        assert panels[0].viz == "charts/a.png"
        assert panels[0].viz_space == "similar"

    def test_literal_na_is_kept_as_text(self, tmp_path):
        """Test 'NA' cells reach the domain as text instead of missing values."""
        data_file = write_csv(
            tmp_path / "panels.csv",
            "name,takeaway,text,vizType,viz\n"
            "p1,NA,NA,embed,https://example.org/embed\n",
        )

        panels = read_panels(data_file)

        assert panels[0].takeaway == "NA"

    def test_unsupported_extension(self, tmp_path):
        data_file = write_csv(tmp_path / "panels.txt", "name\n")
        with pytest.raises(PanelSourceError, match="Please provide a CSV or XLSX file"):
            read_panels(data_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PanelSourceError):
            load_table(tmp_path / "nope.csv")

    def test_missing_required_column(self, tmp_path):
        data_file = write_csv(tmp_path / "panels.csv", "name,takeaway,viz\np1,t,x\n")
        with pytest.raises(PanelSourceError, match="vizType"):
            read_panels(data_file)

    def test_blank_name_is_rejected(self, tmp_path):
        data_file = write_csv(
            tmp_path / "panels.csv",
            "name,takeaway,vizType,viz\n ,t,embed,https://example.org\n",
        )
        with pytest.raises(PanelValidationError):
            read_panels(data_file)

    def test_prompt_resolver(self, tmp_path):
        """Test an interactive resolver fills in an unmatched column."""
        data_file = write_csv(
            tmp_path / "panels.csv",
            "name,takeaway,kind,viz\np1,t,embed,https://example.org\n",
        )
        answers = iter(["kind"])
        resolver = PromptMappingResolver(prompt=lambda message: next(answers))

        panels = read_panels(data_file, resolver=resolver)

        assert panels[0].viz_type == "embed"

    def test_reads_xlsx(self, tmp_path):
        data_file = tmp_path / "panels.xlsx"
        pd.DataFrame(
            [
                {
                    "name": "p1",
                    "takeaway": "Takeaway",
                    "text": None,
                    "vizType": "image-link",
                    "viz": "https://example.org/a.png",
                }
            ]
        ).to_excel(data_file, index=False)

        panels = read_panels(data_file)

        assert panels[0].name == "p1"
        assert panels[0].text == ""
