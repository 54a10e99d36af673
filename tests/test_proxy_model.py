from brandproxy.models.proxy_model import ProxyTarget, classify_request


def test_image_wins_over_everything():
    request = classify_request(img="https://cdn.brandfetch.io/a.png", q="acme", domain="acme.com")
    assert request.target is ProxyTarget.IMAGE
    assert request.value == "https://cdn.brandfetch.io/a.png"
    assert not request.needs_api_key


def test_query_wins_over_domain():
    request = classify_request(q="acme", domain="acme.com")
    assert request.target is ProxyTarget.SEARCH
    assert request.value == "acme"


def test_domain_only():
    request = classify_request(domain="example.com", api_key="k")
    assert request.target is ProxyTarget.BRAND
    assert request.api_key == "k"
    assert request.needs_api_key


def test_nothing_given_is_missing():
    assert classify_request().target is ProxyTarget.MISSING


def test_empty_values_count_as_absent():
    request = classify_request(img="", q="", domain="example.com", api_key="")
    assert request.target is ProxyTarget.BRAND
    assert request.api_key is None
