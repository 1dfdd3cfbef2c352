#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating .poem files."""

import argparse
import json
import sys
from typing import List

from .config import ValidatorConfig
from .report import ValidationResult
from .validate import validate_file


def _location_suffix(error: dict) -> str:
    if 'line' in error and 'column' in error:
        return f" (line {error['line']}, column {error['column']})"
    if 'line' in error:
        return f" (line {error['line']})"
    return ""


def print_result(result: ValidationResult, output_format: str = 'human') -> None:
    """Print a validation result in the requested format."""
    if output_format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif output_format == 'github-actions':
        for error in result.errors:
            message = error['message'].replace('\n', '%0A')
            print(f"::error file={result.file_path},line={error.get('line', 1)}::{message}")
    else:  # human-readable
        if result.ok:
            print(f"[OK] {result.file_path.name} is valid")
        elif result.summary:
            print(f"Error: {result.summary}:", file=sys.stderr)
            for error in result.errors:
                print(f"  ✖ {error['message']}{_location_suffix(error)}", file=sys.stderr)
        else:
            for error in result.errors:
                print(f"Error: {error['message']}{_location_suffix(error)}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='poem-validator',
        description='A validator for .poem files',
    )
    parser.add_argument(
        'poem_file',
        help='Path to the .poem file to validate',
    )
    parser.add_argument(
        '--strict-language',
        action='store_true',
        help='Enforce strict ISO 639-3 + (optional) ISO 15924 language code validation',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validator CLI."""
    args = build_parser().parse_args(argv)

    config = ValidatorConfig.from_env()
    config.set_logging()

    strict_language = args.strict_language or config.strict_language
    result = validate_file(args.poem_file, strict_language=strict_language)

    print_result(result, args.format)
    sys.exit(0 if result.ok else 1)


if __name__ == '__main__':
    main()
