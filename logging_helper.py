import logging
import sys

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
CYAN = "\033[96m"
RESET = "\033[0m"
WHITE = "\033[97m"

STATUS_COLORS = {
    "error": RED,
    "warning": YELLOW,
    "good": GREEN,
    "request": CYAN,
}

# Scenario output is read by humans on stdout, not parsed.
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s.%(msecs)03d - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    stream=sys.stdout,
)

logger = logging.getLogger("api_suite")


def log_status(status, message, extra=""):
    color = STATUS_COLORS.get(status.lower(), WHITE)
    level = logging.ERROR if status.lower() == "error" else logging.INFO
    logger.log(level, f"{color}{message}{extra}{RESET}")


def log_response(response):
    """Dump status line and pretty body of an ApiResponse."""
    status = "good" if 200 <= response.status_code < 300 else "warning"
    log_status(status, response.status_line)
    log_status("info", response.pretty())
