"""
DocuScan - Main Entry Point

Extracts traveler data from scanned travel documents and exports one row per
passenger.

Features:
- Passport, visa and flight ticket extraction through an OCR/AI service
- Passenger consolidation by passport number and fuzzy name matching
- CSV export safe for spreadsheets (BOM, text-marked dates)
- Optional formatted Excel export

Usage:
    python main.py --passport scans/passports --flight scans/tickets [--output out.csv]
    python main.py --records raw.json --excel
"""

import sys
import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import UPLOAD_GROUPS, LOG_FILE, LOG_FORMAT
from consolidator import PassengerConsolidator
from data_loader import load_documents, load_records
from extractors import OpenAIDocumentExtractor
from exporter import (
    export_csv, save_results_to_excel, save_raw_records,
    passengers_to_dataframe, default_output_filename,
    get_next_available_filename
)
from processor import DocumentProcessor
from utils.date_formatter import DateFormatter, DateStyle
from validators.name_matcher import NameMatcher, MatchPolicy

logger = logging.getLogger(__name__)


def setup_logging(log_file=LOG_FILE, level=logging.INFO):
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Extract passenger data from travel document scans"
    )
    parser.add_argument('documents', nargs='*',
                        help="Document images or directories (type detected from file name)")
    for group in UPLOAD_GROUPS:
        parser.add_argument(f'--{group}', nargs='+', default=[], metavar='PATH',
                            help=f"{group.capitalize()} images or directories")
    parser.add_argument('--records', nargs='+', default=[], metavar='FILE',
                        help="Previously extracted records (.json, .csv, .xlsx)")
    parser.add_argument('--output', '-o', help="Output file (default: extracted-data-<date>.csv)")
    parser.add_argument('--excel', action='store_true', help="Also write a formatted .xlsx file")
    parser.add_argument('--raw-output', metavar='FILE',
                        help="Save the per-document records as JSON before consolidation")
    parser.add_argument('--strict-names', action='store_true',
                        help="Require the first name word to match when matching by name")
    parser.add_argument('--date-style', choices=[style.name for style in DateStyle],
                        default=DateStyle.DAY_MONTH_NAME_YEAR.name,
                        help="Date format used in the export")
    parser.add_argument('--verbose', '-v', action='store_true', help="Debug logging")
    return parser


def collect_documents(args):
    """Load documents in upload-group order, then the ungrouped ones."""
    documents = []
    for group in UPLOAD_GROUPS:
        paths = getattr(args, group)
        if paths:
            documents.extend(load_documents(paths, group=group))
    if args.documents:
        documents.extend(load_documents(args.documents))
    return documents


def main(argv=None):
    """Main entry point for document extraction."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    logger.info("=" * 80)
    logger.info("DocuScan - Starting")
    logger.info("=" * 80)

    try:
        # Step 1: Load inputs
        logger.info("=" * 80)
        logger.info("STEP 1: Loading Documents")
        logger.info("=" * 80)

        documents = collect_documents(args)

        existing_records = []
        for records_file in args.records:
            existing_records.extend(load_records(records_file))

        if not documents and not existing_records:
            logger.error("No documents or records to process")
            return 1

        # Step 2: Extract and consolidate
        logger.info("=" * 80)
        logger.info("STEP 2: Extracting Data and Consolidating Passengers")
        logger.info("=" * 80)

        policy = MatchPolicy.STRICT_FIRST_TOKEN if args.strict_names else MatchPolicy.OVERLAP_ONLY
        consolidator = PassengerConsolidator(NameMatcher(policy=policy))

        # Saved records alone need no OCR credentials
        extractor = OpenAIDocumentExtractor() if documents else None

        processor = DocumentProcessor(extractor, consolidator)
        result = processor.process(documents, existing_records)

        if args.raw_output:
            save_raw_records(result.records, args.raw_output)

        # Step 3: Summary
        logger.info("=" * 80)
        logger.info("STEP 3: Processing Complete")
        logger.info("=" * 80)

        logger.info(f"Documents processed: {len(documents)}")
        logger.info(f"Records consolidated: {len(result.records)}")
        logger.info(f"Passengers: {len(result.passengers)}")

        if result.has_failures:
            logger.info("Failed documents:")
            logger.info("-" * 80)
            for failure in result.failures:
                logger.info(f"  {failure.file_name}: {failure.message}")

        if not result.passengers:
            logger.warning("No data was extracted!")
            return 1

        # Step 4: Export
        formatter = DateFormatter(DateStyle[args.date_style])
        output_file = get_next_available_filename(args.output or default_output_filename())
        export_csv(result.passengers, output_file, formatter)

        if args.excel:
            excel_file = get_next_available_filename(Path(output_file).with_suffix(".xlsx"))
            save_results_to_excel(passengers_to_dataframe(result.passengers, formatter), excel_file)

        logger.info("=" * 80)
        logger.info(f"CSV FILE: {output_file}")
        logger.info("Process completed successfully!")
        logger.info("=" * 80)

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        logger.info("Please check your file paths and try again.")
        return 1
    except Exception as e:
        logger.error(f"Error during processing: {e}")
        import traceback
        logger.error(traceback.format_exc())
        return 1


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
