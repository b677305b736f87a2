"""Entry point that lists or extracts the attachments of a winmail.dat file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

# Ensure project root is on sys.path when running as a script
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tnef_decoder.attachments import read_attachments
from tnef_decoder.config import Settings
from tnef_decoder.errors import TnefError
from tnef_decoder.models import Attachment
from tnef_decoder.utils import sha256_hex

load_dotenv()

logger = logging.getLogger("unpack_tnef")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unpack attachments from a TNEF (winmail.dat) file.")
    parser.add_argument("path", type=Path, help="Path to a TNEF file (winmail.dat)")
    parser.add_argument("--output-dir", type=Path, help="Directory to write attachments into")
    parser.add_argument("--list", action="store_true", help="Only describe attachments, write nothing")
    parser.add_argument("--overwrite", action="store_true", help="Replace files that already exist")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def describe(attachment: Attachment) -> str:
    meta_len = len(attachment.meta) if attachment.meta is not None else None
    return (
        f"Title: {attachment.title!r}\n"
        f"Create date: {attachment.create_date.isoformat()}\n"
        f"Modify date: {attachment.modify_date.isoformat()}\n"
        f"Data len: {len(attachment.data)}\n"
        f"Meta len: {meta_len}\n"
        f"Transport filename: {attachment.transport_filename!r}\n"
        f"Rendering data: {attachment.rend_data}\n"
        f"Props len: {len(attachment.props)}\n"
        f"SHA-256: {sha256_hex(attachment.data)}\n"
    )


def write_attachment(
    attachment: Attachment, output_dir: Path, settings: Settings, overwrite: bool
) -> Path | None:
    target = output_dir / settings.attachment_filename(
        attachment.title, attachment.transport_filename
    )
    if target.exists() and not overwrite:
        logger.warning("Refusing to overwrite existing file %s", target)
        return None
    target.write_bytes(attachment.data)
    logger.info("Wrote %d bytes to %s", len(attachment.data), target)
    return target


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)
    output_dir = args.output_dir or settings.output_dir
    overwrite = args.overwrite or settings.overwrite

    buffer = args.path.read_bytes()
    try:
        attachments = read_attachments(buffer)
    except TnefError as exc:
        logger.error("Failed to decode %s (%s error): %s", args.path, exc.kind, exc)
        return 1

    stats = {"found": len(attachments), "written": 0, "skipped": 0}
    if not args.list:
        output_dir.mkdir(parents=True, exist_ok=True)

    for attachment in attachments:
        print(describe(attachment))
        if args.list:
            continue
        if write_attachment(attachment, output_dir, settings, overwrite) is None:
            stats["skipped"] += 1
        else:
            stats["written"] += 1

    logger.info(
        "Run complete: found=%s written=%s skipped=%s",
        stats["found"],
        stats["written"],
        stats["skipped"],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
