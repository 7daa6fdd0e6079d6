import logging
import sys

def setup_logging(debug: bool = False) -> logging.Logger:
    """Set up logging to stderr.
    
    Stdout carries only the filtered field, so every log record goes to stderr.
    
    Args:
        debug: Log pipeline stages at DEBUG level when True
        
    Returns:
        Root logger instance
    """
    level = logging.DEBUG if debug else logging.WARNING
    
    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )
    
    return logging.getLogger()
