import logging
import warnings

import pandas as pd

from errors import ParseError

logger = logging.getLogger(__name__)

READ_OPTIONS = dict(
    dtype=str,
    index_col=False,
    keep_default_na=False,
    na_filter=False,
    encoding="utf-8-sig",
)


def _read_header(file_path):
    """Return the header row exactly as written, before pandas renames duplicates."""
    header = pd.read_csv(file_path, header=None, nrows=1, **READ_OPTIONS)
    return [str(c) for c in header.iloc[0].tolist()]


def parse_csv(file_path):
    """
    Parse a CSV file into a list of records.

    The header row gives the field names. Every cell is kept as a string, so
    "1000" stays "1000" and empty cells become "". An empty file or a file
    with only a header yields an empty list.

    Args:
        file_path (str): Path of the CSV file on disk

    Returns:
        list[dict]: One dict per data row, in file order

    Raises:
        ParseError: If the file cannot be read, decoded or parsed, if a row
            has more fields than the header, or if the header repeats a name
    """
    try:
        # Rows wider than the header are only a ParserWarning otherwise, and lose data
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(file_path, **READ_OPTIONS)
            header = _read_header(file_path) if len(df.columns) else []
    except pd.errors.EmptyDataError:
        logger.debug("Empty CSV: %s", file_path)
        return []
    except pd.errors.ParserWarning as e:
        raise ParseError("Malformed CSV file: row has more fields than the header") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Could not decode CSV file as UTF-8: {e.reason}") from e
    except pd.errors.ParserError as e:
        raise ParseError(f"Malformed CSV file: {e}") from e
    except OSError as e:
        raise ParseError(f"Could not read CSV file: {e}") from e

    duplicates = sorted({name for name in header if header.count(name) > 1})
    if duplicates:
        raise ParseError(f"Malformed CSV file: duplicate column names {', '.join(duplicates)}")

    # Short rows are padded with NaN even with na_filter off
    df = df.fillna("")
    df.columns = [str(c) for c in df.columns]
    records = df.to_dict(orient="records")

    logger.debug("Parsed %d rows with columns %s", len(records), list(df.columns))
    return records
