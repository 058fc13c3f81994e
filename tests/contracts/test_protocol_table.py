from dgraphql.contracts.protocol import DQL, GRAPHQL, RAW_GRAPHQL, RDF, BodyEncoding


def test_graphql_descriptor() -> None:
    assert GRAPHQL.path == "/graphql"
    assert GRAPHQL.content_type == "application/json"
    assert GRAPHQL.encoding is BodyEncoding.GRAPHQL_ENVELOPE
    assert GRAPHQL.check_errors
    assert GRAPHQL.params == ()


def test_dql_descriptor() -> None:
    assert DQL.path == "/query"
    assert DQL.content_type == "application/dql"
    assert DQL.encoding is BodyEncoding.RAW
    assert DQL.check_errors


def test_rdf_descriptor_commits_and_skips_error_check() -> None:
    assert RDF.path == "/mutate"
    assert RDF.params == (("commitNow", "true"),)
    assert RDF.content_type == "application/rdf"
    assert not RDF.check_errors
    assert RDF.span_name == "rdf"


def test_raw_graphql_descriptor_targets_endpoint_as_given() -> None:
    assert RAW_GRAPHQL.path == ""
    assert RAW_GRAPHQL.encoding is BodyEncoding.GRAPHQL_ENVELOPE
    assert RAW_GRAPHQL.check_errors
