# File: scripts/check_db.py
# Project: eco-report-backend
# Connectivity check for DATABASE_URL, optionally creating the tables.

import os
import sys
from dotenv import load_dotenv
from sqlalchemy import inspect, text

load_dotenv(override=True)

from app.db.session import Database  # noqa: E402

url = os.getenv("DATABASE_URL")
if not url:
    print("DATABASE_URL is not set")
    sys.exit(1)

db = Database(url)
try:
    with db.engine.connect() as conn:
        print("select 1 ->", conn.scalar(text("select 1")))
    if "--create" in sys.argv:
        db.create_all()
        print("tables ->", ", ".join(sorted(inspect(db.engine).get_table_names())))
except Exception as e:
    print("Error connecting to the database:", e)
    sys.exit(1)
finally:
    db.dispose()
