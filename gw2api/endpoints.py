from gw2api.structures import Endpoint


ENDPOINTS: dict[str, Endpoint] = {
    ep.name: ep
    for ep in [
        Endpoint(
            name="account",
            path="/v2/account",
            authenticated=True,
        ),
        Endpoint(
            name="account.bank",
            path="/v2/account/bank",
            authenticated=True,
        ),
        Endpoint(
            name="items",
            path="/v2/items",
            bulk=True,
            paginated=True,
            localized=True,
        ),
        Endpoint(
            name="recipes",
            path="/v2/recipes",
            bulk=True,
            paginated=True,
        ),
        # small enough for ?ids=all
        Endpoint(
            name="worlds",
            path="/v2/worlds",
            bulk=True,
            bulk_all=True,
            paginated=True,
            localized=True,
        ),
    ]
}
