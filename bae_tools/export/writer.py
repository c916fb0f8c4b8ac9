import logging
from collections.abc import Iterable, Mapping, Sequence
from csv import QUOTE_ALL, DictWriter
from pathlib import Path
from typing import Callable, TextIO

from tqdm import tqdm

from bae_tools.enums import Format
from bae_tools.export.util import clean_txt_cell, format_txt_tags

logger = logging.getLogger(__name__)

Records = Iterable[Mapping[str, str]]


def write_csv(f: TextIO, records: Records, headers: Sequence[str]) -> None:
    """
    Header line, then one row per record with every cell quoted
    """
    f.write(",".join(headers) + "\n")
    writer = DictWriter(
        f,
        fieldnames=headers,
        restval="",
        quoting=QUOTE_ALL,
        lineterminator="\n",
    )
    for record in records:
        writer.writerow(record)


def write_txt(f: TextIO, records: Records, headers: Sequence[str]) -> None:
    """
    One brace-delimited block per record, like:

        {
          name | Amy Bee
          tags | [ friend : 2, vip ]
        }
    """
    for record in records:
        f.write("{\n")
        for header in headers:
            cell = record.get(header, "")
            if header == "tags" and cell:
                cell = format_txt_tags(cell)
            else:
                cell = clean_txt_cell(cell)
            f.write(f"  {header} | {cell}\n")
        f.write("}\n\n")


WRITERS: dict[Format, Callable[[TextIO, Records, Sequence[str]], None]] = {
    Format.CSV: write_csv,
    Format.TXT: write_txt,
}


def write_file(
    records: Sequence[Mapping[str, str]],
    headers: Sequence[str],
    base_path: Path,
    fmt: Format,
    progress: bool = False,
) -> Path:
    """
    Write records to `base_path` plus the format's extension, overwriting any existing
    file. Returns the path written.
    """
    if fmt not in WRITERS:
        # Formats are checked before we get here
        raise RuntimeError(f"Unknown/unsupported export format: {fmt}. This is a bug")

    file_path = base_path.parent / f"{base_path.name}.{fmt.value}"
    logger.debug(f"Writing {len(records)} records to {file_path}")

    rows = tqdm(records, desc=f"Exporting {fmt.value}", disable=not progress)
    # newline="" so the csv module is in charge of line endings
    with file_path.open("w", encoding="utf-8", newline="") as f:
        WRITERS[fmt](f, rows, headers)
    return file_path
