from __future__ import annotations
import logging
from typing import Protocol

from lispy.config import get_prelude_file

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str, filename: str = ...) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    path = get_prelude_file()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{path}' (LISPY_PRELUDE_PATH)")
    logger.debug("Loading prelude from %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'), str(path))
