"""
Sets up the connection to the Elastic server.

The client returned by connect_elastic() is the handle that every operation in this package takes
as its first argument. Create it once and pass it around; nothing here caches it for you.
"""
import logging

from elasticsearch import Elasticsearch

from modelindex.config import Settings, get_settings


class CannotConnectElastic(Exception):
    pass


def _client_from_settings(settings: Settings) -> Elasticsearch:
    """
    Construct the elastic client from the given settings
    """
    if settings.elastic_password:
        host = settings.elastic_host
        if settings.elastic_verify_ssl is None:
            verify_certs = "localhost" in (host or "")
        else:
            verify_certs = settings.elastic_verify_ssl

        return Elasticsearch(
            host,
            basic_auth=("elastic", settings.elastic_password),
            verify_certs=verify_certs,
        )
    else:
        return Elasticsearch(settings.elastic_host or None)


def connect_elastic(settings: Settings | None = None) -> Elasticsearch:
    """
    Connect to the elastic server and check that it responds
    """
    settings = settings or get_settings()
    logging.debug(
        f"Connecting with elasticsearch at {settings.elastic_host}, "
        f"password? {'yes' if settings.elastic_password else 'no'} "
    )
    elastic = _client_from_settings(settings)
    if not elastic.ping():
        raise CannotConnectElastic(f"Cannot connect to elasticsearch server {settings.elastic_host}")
    return elastic
