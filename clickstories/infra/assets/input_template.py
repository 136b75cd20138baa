"""
Blank panel spreadsheet shipped with the package.
"""

import shutil
from pathlib import Path
from typing import Optional, Union

from clickstories.domain_core.exceptions import TemplateExistsError
from clickstories.infra.config.logging_config import get_logger
from clickstories.infra.config.settings import PACKAGE_DIR

TEMPLATE_PATH = PACKAGE_DIR / "data" / "clickstories_template.csv"

logger = get_logger(__name__)


def download_template(
    destfile: Optional[Union[str, Path]] = None, overwrite: bool = False
) -> Path:
    """Return the packaged template, or copy it to ``destfile``.

    Raises:
        TemplateExistsError: ``destfile`` exists and ``overwrite`` is False.
    """
    if destfile is None:
        return TEMPLATE_PATH

    destination = Path(destfile).expanduser()
    if destination.exists() and not overwrite:
        raise TemplateExistsError(str(destination))
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(TEMPLATE_PATH, destination)
    logger.info("template.copied", destination=str(destination))
    return destination
