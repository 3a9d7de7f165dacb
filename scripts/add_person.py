#!/usr/bin/env python3
"""
Cadastrar (ou sobrescrever) uma pessoa diretamente no arquivo JSON.

Uso:
  python scripts/add_person.py --id 1 --first-name Ada --second-name Lovelace --age 36 [--db-file db.json]
"""
from __future__ import annotations

import argparse
import sys

from people_api.core.config import get_settings
from people_api.core.observability import setup_logging
from people_api.domain.errors import StoreError
from people_api.domain.people import Person, parse_key
from people_api.repositories.json_storage import PeopleStore


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Upsert a person into the JSON store")
    ap.add_argument("--id", required=True, help="Integer key (ex.: 1)")
    ap.add_argument("--first-name", default="", help="First name")
    ap.add_argument("--second-name", default="", help="Second name")
    ap.add_argument("--age", type=int, default=0, help="Age in years")
    ap.add_argument("--db-file", help="Backing file (default: PEOPLE_DB_FILE or db.json)")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        key = parse_key((args.id or "").strip())
    except StoreError as exc:
        raise SystemExit(f"Invalid id: {exc.message}")

    store = PeopleStore(args.db_file or settings.db_file)
    person = Person(first_name=args.first_name, second_name=args.second_name, age=args.age)
    store.set(key, person)
    print("OK: person stored")
    print(f"  id: {key}")
    print(f"  {person.to_json()}")
    print(f"  file: {store.path}")


if __name__ == "__main__":
    try:
        main()
    except StoreError as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc.message}\n")
        raise SystemExit(1)
