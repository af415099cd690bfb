"""
Metadata Contributor - Main Entry Point

Runs one XPath contributor over a local XML record and prints the resulting
metadata as JSON lines. Useful to check a query and namespace profile against
a saved harvest response before wiring it into an import.

Usage:
    python -m importer.contributors.main [OPTIONS] FILE

Options:
    --query TEXT          XPath query selecting the values (required)
    --field TEXT          Destination field, e.g. dc.identifier.other (required)
    --profile TEXT        Namespace profile name from config/namespaces.yml
    --config PATH         Namespace configuration file
                          (default: $IMPORTER_NAMESPACES_CONFIG or config/namespaces.yml)
    --arxiv-id            Keep only the trailing identifier segment of each value
    --verbose             Enable debug logging

Examples:
    # Extract arXiv identifiers from a saved Atom feed:
    python -m importer.contributors.main --profile arxiv --arxiv-id \\
        --query "//atom:entry/atom:id" --field dc.identifier.other feed.xml

Exit Codes:
    0: Success
    1: Query error (malformed query or unbound namespace prefix)
    2: Fatal error (missing file, unparsable XML, invalid configuration)
    130: Interrupted by user
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv
from lxml import etree

from ..metadata_mapping.field_config import MetadataFieldConfig
from ..metadata_mapping.metadatum import Metadatum
from ..metadata_mapping.namespaces import NamespaceBinder, get_namespace_profile
from .arxiv_id import ArXivIdContributor
from .xpath import QueryError, SimpleXpathContributor

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Extract metadata values from an XML record with an XPath query',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        'file',
        type=str,
        help='Path to the XML record'
    )

    parser.add_argument(
        '--query',
        type=str,
        required=True,
        help='XPath query selecting the values'
    )

    parser.add_argument(
        '--field',
        type=str,
        required=True,
        help='Destination field (schema.element[.qualifier])'
    )

    parser.add_argument(
        '--profile',
        type=str,
        help='Namespace profile name',
        default=None
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Namespace configuration file',
        default=None
    )

    parser.add_argument(
        '--arxiv-id',
        action='store_true',
        help='Keep only the trailing identifier segment of each value',
        dest='arxiv_id'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def run_contributor(
    contributor: SimpleXpathContributor,
    record: etree._Element,
    output: TextIO,
) -> list[Metadatum]:
    """
    Run a contributor over one record and write its values as JSON lines.

    Args:
        contributor: Configured contributor
        record: Parsed XML root element
        output: Stream receiving one JSON object per value

    Returns:
        The contributed Metadatum records

    Raises:
        QueryError: If the contributor's query cannot be evaluated
    """
    values = contributor.contribute_metadata(record)
    for value in values:
        output.write(json.dumps(value.to_dict(), ensure_ascii=False) + "\n")

    logger.info(
        "Contributor completed",
        extra={
            'field': str(contributor.field),
            'values': len(values),
        }
    )
    return values


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the contributor CLI.

    Returns:
        Exit code (0 = success, 1 = query error, 2 = fatal error, 130 = interrupted)
    """
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    config_path = args.config or os.getenv('IMPORTER_NAMESPACES_CONFIG')

    try:
        field = MetadataFieldConfig.from_string(args.field)
        namespaces = (
            get_namespace_profile(args.profile, config_path)
            if args.profile
            else NamespaceBinder()
        )
        contributor_cls = ArXivIdContributor if args.arxiv_id else SimpleXpathContributor
        contributor = contributor_cls(args.query, field, namespaces=namespaces)
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        record = etree.parse(args.file).getroot()
    except (OSError, etree.XMLSyntaxError) as e:
        logger.error(f"Cannot read XML record {args.file}: {e}")
        return 2

    try:
        run_contributor(contributor, record, sys.stdout)
    except QueryError as e:
        logger.error(f"Query error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # Standard Unix exit code for SIGINT

    return 0


if __name__ == '__main__':
    sys.exit(main())
