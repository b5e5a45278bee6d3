import os
from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Paths
OUTPUT_DIR = BASE_DIR / "output"
DATA_DIR = BASE_DIR / "data"

# Ensure directories exist
OUTPUT_DIR.mkdir(exist_ok=True)
(OUTPUT_DIR / "payslips").mkdir(exist_ok=True)
(OUTPUT_DIR / "registers").mkdir(exist_ok=True)
DATA_DIR.mkdir(exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'payroll.db'}")

# Application settings
DEBUG = os.getenv("DEBUG", "True").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
COMPANY_NAME = os.getenv("COMPANY_NAME", "SAHOD Demo Company")
CURRENCY_SYMBOL = "₱"

# Placeholder earnings policy, as fractions of basic salary
OVERTIME_RATE = Decimal(os.getenv("OVERTIME_RATE", "0.08"))
ALLOWANCE_RATE = Decimal(os.getenv("ALLOWANCE_RATE", "0.06"))
HOLIDAY_RATE = Decimal(os.getenv("HOLIDAY_RATE", "0"))
