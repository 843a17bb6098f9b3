from products.application.queries import ProductListArgs
from products.domain import config


def test_defaults_when_args_missing():
    args = ProductListArgs.from_graphql_args(None)

    assert args.search is None
    assert args.filter is None
    assert args.sort is None
    assert args.current_page == config.DEFAULT_CURRENT_PAGE
    assert args.page_size == config.DEFAULT_PAGE_SIZE


def test_graphql_names_are_mapped():
    args = ProductListArgs.from_graphql_args({
        "search": "shoe",
        "filter": {"name": {"like": "red"}},
        "sort": {"price": "DESC"},
        "currentPage": 2,
        "pageSize": 5,
    })

    assert args.search == "shoe"
    assert args.filter == {"name": {"like": "red"}}
    assert args.sort == {"price": "DESC"}
    assert (args.current_page, args.page_size) == (2, 5)


def test_explicit_none_pages_fall_back_to_defaults():
    args = ProductListArgs.from_graphql_args({"currentPage": None, "pageSize": None})
    assert (args.current_page, args.page_size) == (config.DEFAULT_CURRENT_PAGE, config.DEFAULT_PAGE_SIZE)


def test_zero_pages_are_kept_for_validation():
    args = ProductListArgs.from_graphql_args({"currentPage": 0, "pageSize": 0})
    assert (args.current_page, args.page_size) == (0, 0)


def test_malformed_shapes_are_ignored():
    args = ProductListArgs.from_graphql_args({
        "search": 42,
        "filter": {"name": "red", "sku": {"eq": "A"}},
        "sort": ["name"],
    })

    assert args.search is None
    assert args.filter == {"sku": {"eq": "A"}}
    assert args.sort is None
