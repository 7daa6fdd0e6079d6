#!/usr/bin/env python3

import sys
import logging
from enum import Enum
from typing import List, Optional, TextIO

from cli.arguments import parse_args
from config.filter_config import FilterConfig
from filtering import read_line, split_by_delimiter, get_field
from utils.colors import ColorString, match_color
from utils.errors import PipelineError, OutputWriteError
from utils.logging import setup_logging

logger = logging.getLogger(__name__)

class PipelineStage(str, Enum):
    """Stages of a filter run, in the order they execute."""

    READ = "read"
    SPLIT = "split"
    COLORIZE = "colorize"
    PRINT = "print"

def _enter(stage: PipelineStage) -> PipelineStage:
    logger.debug(f"Entering stage: {stage.value}")
    return stage

def run(config: FilterConfig, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """
    Read one line, select a field and print it in color.
    
    Stages run strictly in order. A failure in any stage stops the run before
    anything is written to stdout.
    
    Args:
        config: Validated run configuration
        stdin: Stream to read the line from, defaults to sys.stdin
        stdout: Stream to print the field to, defaults to sys.stdout
        
    Returns:
        The colorized field as printed, without the newline
        
    Raises:
        PipelineError: If any stage fails; its stage attribute names the stage
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    
    stage = _enter(PipelineStage.READ)
    try:
        line = read_line(stdin)
        
        stage = _enter(PipelineStage.SPLIT)
        fields = split_by_delimiter(line, config.delimiter)
        field = get_field(fields, config.field)
        
        stage = _enter(PipelineStage.COLORIZE)
        color = match_color(config.color)
        color_string = ColorString(color=color, string=field)
        colorised = color_string.paint()
        
        stage = _enter(PipelineStage.PRINT)
        try:
            stdout.write(f"{colorised}\n")
            stdout.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"Failed to write output: {e}") from e
    except PipelineError as e:
        e.stage = stage.value
        logger.debug(f"Stage {stage.value} failed: {e}")
        raise
    
    return colorised

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the field filter."""
    config = parse_args(argv)
    setup_logging(config.debug)
    logger.debug(f"Arguments parsed successfully: {config}")
    
    try:
        run(config)
    except PipelineError as e:
        print(f"Application running error: {e}", file=sys.stderr)
        return 1
    
    return 0

if __name__ == "__main__":
    sys.exit(main())
