# File: stitcher/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Ledger models inherit from this.
Base = declarative_base()
