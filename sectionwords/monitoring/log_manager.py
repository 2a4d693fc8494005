import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class LogManager:
    """Logging setup: console always, dated log files when a log directory is given"""

    def __init__(self, log_level: str = "WARNING", log_dir: Optional[str] = None):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up console logging plus optional detailed file handlers"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        root_logger.handlers.clear()

        # stderr, so the results table on stdout stays clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        self.perf_logger = logging.getLogger('performance')
        self.perf_logger.handlers.clear()

        if not self.log_dir:
            self.perf_logger.propagate = True
            return

        all_logs_file = self.log_dir / f"sectionwords_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

        perf_file = self.log_dir / f"performance_{datetime.now().strftime('%Y%m%d')}.log"
        self.perf_logger.setLevel(logging.INFO)
        self.perf_logger.addHandler(logging.FileHandler(perf_file))
        self.perf_logger.propagate = False

    def log_performance_event(self, event_type: str, **kwargs):
        """Log a timing event as one JSON line"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            **kwargs
        }
        self.perf_logger.info(json.dumps(event_data))

    def export_report_json(self, report_data: Dict[str, Any], path: str) -> Path:
        """Write a report dict to a JSON file"""
        export_path = Path(path)
        export_path.parent.mkdir(parents=True, exist_ok=True)
        with open(export_path, 'w') as f:
            json.dump(report_data, f, indent=2, default=str)

        logging.info(f"Report exported to {export_path}")
        return export_path
