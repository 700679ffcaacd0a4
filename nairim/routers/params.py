from fastapi import Request

from nairim.services.query import ListParams


def list_params(request: Request) -> ListParams:
    """
    Параметры списка из query string: limit, page, search, includeInactive,
    sort_<field> или sort[<field>], <field>[from]/<field>[to] и фильтры <field>=<value>
    """
    return ListParams.from_query(request.query_params.multi_items())
