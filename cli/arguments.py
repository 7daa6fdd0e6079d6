import argparse
from typing import List, Optional

from pydantic import ValidationError

from config.filter_config import FilterConfig

def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.
    
    Returns:
        Parser for the filter's flags
    """
    parser = argparse.ArgumentParser(
        prog='colorize-field',
        description='Print one field of a line from stdin in color',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    
    # Required arguments
    parser.add_argument(
        '-f',
        dest='field',
        type=int,
        required=True,
        help='Zero-based index of the field to print'
    )
    parser.add_argument(
        '-d',
        dest='delimiter',
        type=str,
        required=True,
        help='Delimiter to split the line on'
    )
    # No choices here, unknown tokens are rejected by the pipeline
    parser.add_argument(
        '-c',
        dest='color',
        type=str,
        required=True,
        help='Color of the printed field: r, g, b or y'
    )
    
    # Optional arguments
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Log pipeline stages to stderr'
    )
    
    return parser

def validate_args(args: argparse.Namespace) -> FilterConfig:
    """
    Validate parsed arguments.
    
    Args:
        args: Parsed command line arguments
        
    Returns:
        Validated configuration
        
    Raises:
        ValueError: If arguments are invalid
    """
    try:
        return FilterConfig(
            field=args.field,
            delimiter=args.delimiter,
            color=args.color,
            debug=args.debug
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValueError(problems) from e

def parse_args(argv: Optional[List[str]] = None) -> FilterConfig:
    """
    Parse command line arguments.
    
    Args:
        argv: Arguments to parse, defaults to sys.argv[1:]
    
    Returns:
        Validated configuration
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    
    try:
        config = validate_args(args)
    except ValueError as e:
        parser.error(str(e))
    
    return config
