"""
Filesystem asset resolver.
"""

import shutil
from pathlib import Path, PurePosixPath
from typing import Union

from clickstories.application.ports import AssetResolverPort
from clickstories.infra.config.logging_config import get_logger


class FileAssetResolver(AssetResolverPort):
    """Copies local files under the story directory.

    Copies overwrite, so staging the same file twice is harmless.
    """

    def __init__(self, output_root: Union[str, Path]):
        self.output_root = Path(output_root)
        self._log = get_logger("infra.asset_resolver")

    def exists(self, path: str) -> bool:
        if not path:
            return False
        return Path(path).expanduser().is_file()

    def copy_into(self, path: str, target_dir: str = "images") -> str:
        return self.copy_as(path, str(PurePosixPath(target_dir, Path(path).name)))

    def copy_as(self, path: str, target: str) -> str:
        source = Path(path).expanduser()
        destination = self.output_root / target
        destination.parent.mkdir(parents=True, exist_ok=True)
        if source.resolve() != destination.resolve():
            shutil.copyfile(source, destination)
        self._log.debug(
            "asset.copied", source=str(source), destination=str(destination)
        )
        return str(PurePosixPath(target))
