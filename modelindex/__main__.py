"""
Manage the elastic indices of models
"""

import argparse
import logging

from modelindex.config import ENV_PREFIX, get_settings
from modelindex.elastic_connection import connect_elastic
from modelindex.index import create_index, delete_index
from modelindex.schema import get_schema


def run_create_index(args):
    result = create_index(connect_elastic(), args.model, nested_limit=args.nested_limit)
    logging.info(f"Created index {result['index']}")


def run_delete_index(args):
    delete_index(connect_elastic(), args.model, ignore_missing=args.ignore_missing)


def show_schema(args):
    for field in get_schema(connect_elastic(), args.index):
        print(field)


def show_config(args):
    settings = get_settings()
    for fieldname, fieldinfo in type(settings).model_fields.items():
        if doc := fieldinfo.description:
            print(f"# {doc}")
        value = getattr(settings, fieldname)
        if value is None:
            print(f"#{ENV_PREFIX}{fieldname}=\n")
        else:
            print(f"{ENV_PREFIX}{fieldname}={value}\n")


def main():
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m modelindex")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("create-index", help="(Re)create the index for a model. DELETES the existing index!")
    p.add_argument("model", help="The model name, e.g. user_profile")
    p.add_argument("--nested-limit", type=int, help="Maximum number of nested fields (default: from settings)")
    p.set_defaults(func=run_create_index)

    p = subparsers.add_parser("delete-index", help="Delete the index for a model")
    p.add_argument("model", help="The model name, e.g. user_profile")
    p.add_argument("--ignore-missing", action="store_true", help="Do not fail if the index does not exist")
    p.set_defaults(func=run_delete_index)

    p = subparsers.add_parser("schema", help="List the filterable fields of an index")
    p.add_argument("index", help="The index name")
    p.set_defaults(func=show_schema)

    p = subparsers.add_parser("config", help="Print the current settings in .env format")
    p.set_defaults(func=show_config)

    args = parser.parse_args()

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.INFO)
    es_logger = logging.getLogger("elasticsearch")
    es_logger.setLevel(logging.WARNING)

    args.func(args)


if __name__ == "__main__":
    main()
