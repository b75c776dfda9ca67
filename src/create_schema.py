''' Create the applicant table schema in the database '''

from db import get_conn

DDL = """
CREATE TABLE IF NOT EXISTS applicant (
  id                 SERIAL PRIMARY KEY,

  -- Required on create
  first_name         TEXT    NOT NULL,
  last_name          TEXT    NOT NULL,
  age                INTEGER NOT NULL,
  email              TEXT    NOT NULL,

  -- Free-form profile text
  professional_desc  TEXT,
  hobbies            TEXT
);
"""


def main():
    ''' Create the applicant table if it does not exist '''
    with get_conn() as conn, conn.cursor() as cur:
        cur.execute(DDL)
    print("Schema created/verified.")


if __name__ == "__main__":
    main()
