from __future__ import annotations
import logging
import re
from typing import List, Optional

import pandas as pd

from winners.core.errors import AllocationError, FileOpenError, InvalidSeparator, MissingColumnError

logger = logging.getLogger(__name__)


def _open_failed(path: str, exc: BaseException) -> FileOpenError:
    logger.debug(f"Cannot read {path!r}: {exc}")
    return FileOpenError(path, reason=str(exc))


def load_lines(path: str, encoding: str = "utf-8") -> List[str]:
    """Read one participant per line, in file order.

    Trailing CR/LF characters are stripped and lines left empty are skipped.
    Duplicates are kept. An empty result is returned as-is; deciding that
    zero participants is an error belongs to the caller.
    """
    lines: List[str] = []
    try:
        # newline="" keeps \r so "\r\n" and lone "\r" endings are stripped the same way
        with open(path, encoding=encoding, newline="") as f:
            for raw in f:
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                lines.append(line)
    except MemoryError:
        raise AllocationError()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise _open_failed(path, e)

    logger.debug(f"Loaded {len(lines)} line(s) from {path!r}")
    return lines


def _check_separator(sep: str) -> None:
    # pandas trata separadores de mas de un caracter como regex
    if not sep:
        raise InvalidSeparator(sep)
    if len(sep) > 1:
        try:
            re.compile(sep)
        except re.error:
            raise InvalidSeparator(sep)


def load_column(path: str, column: str, sep: str = ",", encoding: str = "utf-8") -> List[str]:
    """Read participants from one column of a delimited file with a header row.

    Header names are trimmed and lower-cased before matching, values are
    trimmed and empty values dropped.
    """
    _check_separator(sep)
    try:
        engine = "python" if len(sep) > 1 else "c"
        df = pd.read_csv(path, sep=sep, engine=engine, encoding=encoding, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return []
    except MemoryError:
        raise AllocationError()
    except (OSError, UnicodeDecodeError, LookupError, ValueError) as e:
        raise _open_failed(path, e)

    # normalizar encabezados
    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.loc[:, ~df.columns.duplicated()]
    key = column.strip().lower()
    if key not in df.columns:
        raise MissingColumnError(column, path)

    values = df[key].fillna("").str.strip()
    names = [v for v in values.tolist() if v]
    logger.debug(f"Loaded {len(names)} value(s) from column {key!r} of {path!r}")
    return names


def load_participants(
    path: str,
    column: Optional[str] = None,
    sep: str = ",",
    encoding: str = "utf-8",
) -> List[str]:
    if column:
        return load_column(path, column, sep=sep, encoding=encoding)
    return load_lines(path, encoding=encoding)
