"""
Выбор плана выполнения запроса списка.

Поиск по тексту и сортировка по связанному полю выполняются в памяти
по полной отфильтрованной выборке. Все остальное уходит в БД:
страница записей и отдельный подсчет с тем же условием.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from sqlalchemy import distinct, func, inspect as sa_inspect, select
from sqlalchemy.orm import Session

from nairim.services.query.fields import FieldMapping, SearchProfile
from nairim.services.query.filters import FilterCondition, parse_filters
from nairim.services.query.memory import InMemorySearchAndSort
from nairim.services.query.params import ListParams, Page

logger = logging.getLogger(__name__)

MEMORY_PLAN = "memory"
PUSHDOWN_PLAN = "pushdown"


@dataclass(frozen=True)
class EntityQuery:
    """Все, что планировщику нужно знать о сущности"""
    model: Any
    fields: FieldMapping
    search: SearchProfile
    load_options: Tuple[Any, ...] = ()
    default_order: Tuple[Tuple[str, str], ...] = (("created_at", "desc"),)


def to_one_scalar(model, parts: Tuple[str, ...]):
    """
    Коррелированный подзапрос к полю через цепочку ссылок "к одному".
    Для коллекций возвращает None: такое поле в БД не сортируется.
    """
    conditions = []
    current = model
    for name in parts[:-1]:
        relationships = sa_inspect(current).relationships
        if name not in relationships or relationships[name].uselist:
            return None
        rel = relationships[name]
        conditions.append(rel.primaryjoin)
        current = rel.mapper.class_
    return select(getattr(current, parts[-1])).where(*conditions).correlate(model).scalar_subquery()


class QueryPlanner:
    """
    Выполняет запрос списка для одной сущности.

    Таблица полей и профиль поиска приходят из EntityQuery и
    используются одинаково в обоих планах.
    """

    def __init__(self, db: Session, entity: EntityQuery):
        self.db = db
        self.entity = entity
        self.model = entity.model
        self.memory = InMemorySearchAndSort(entity.fields, entity.search)

    def choose_plan(self, params: ListParams) -> str:
        if params.search_term:
            return MEMORY_PLAN
        sort_field = params.sort_field
        field_spec = self.entity.fields.get(sort_field) if sort_field else None
        if field_spec is not None and field_spec.sortable and not field_spec.is_direct:
            return MEMORY_PLAN
        return PUSHDOWN_PLAN

    def conditions(self, params: ListParams) -> List[Any]:
        """Условие выборки: сначала мягкое удаление, затем фильтры"""
        where = []
        if not params.include_inactive:
            where.append(self.model.deleted_at.is_(None))
        parsed: List[FilterCondition] = parse_filters(self.entity.fields, params.filters)
        where.extend(condition.to_clause(self.model) for condition in parsed)
        return where

    def order_by(self, sort_options: Dict[str, str]) -> List[Any]:
        clauses = []
        for name, direction in sort_options.items():
            field_spec = self.entity.fields.get(name)
            if field_spec is None or not field_spec.sortable:
                continue
            if field_spec.is_direct:
                expression = getattr(self.model, field_spec.column)
            else:
                expression = to_one_scalar(self.model, field_spec.relation_parts)
                if expression is None:
                    continue
            clauses.append(expression.desc() if direction == "desc" else expression.asc())

        if not clauses:
            for column, direction in self.entity.default_order:
                expression = getattr(self.model, column)
                clauses.append(expression.desc() if direction == "desc" else expression.asc())

        clauses.append(self.model.id.asc())
        return clauses

    def list(self, params: ListParams) -> Page:
        plan = self.choose_plan(params)
        where = self.conditions(params)
        logger.debug(
            f"{self.model.__name__} list: plan={plan}, page={params.current_page}, "
            f"take={params.take}, filters={list(params.filters)}, sort={params.sort_options}"
        )

        if plan == MEMORY_PLAN:
            records = self.db.scalars(
                select(self.model).where(*where).options(*self.entity.load_options)
            ).all()
            data, count = self.memory.apply(
                records,
                search=params.search_term,
                sort_field=params.sort_field,
                sort_direction=params.sort_options.get(params.sort_field, "asc") if params.sort_field else "asc",
                skip=params.skip,
                take=params.take,
            )
            return Page.build(data, count, params)

        count = self.db.scalar(select(func.count()).select_from(self.model).where(*where)) or 0
        # Страница за пределами выборки: OFFSET может не поместиться в BIGINT
        if params.skip >= count:
            return Page.build([], count, params)

        statement = (
            select(self.model)
            .where(*where)
            .options(*self.entity.load_options)
            .order_by(*self.order_by(params.sort_options))
            .offset(params.skip)
            .limit(params.take)
        )
        data = list(self.db.scalars(statement).all())
        return Page.build(data, count, params)

    def filter_options(self) -> Dict[str, Any]:
        """
        Значения для выпадающих фильтров: уникальные значения полей,
        помеченных facet, и границы дат создания
        """
        options: Dict[str, Any] = {}
        alive = self.model.deleted_at.is_(None)

        for name, field_spec in self.entity.fields.items():
            if not field_spec.facet:
                continue
            options[name] = self._distinct_values(field_spec.relation_parts, alive)

        bounds = self.db.execute(
            select(func.min(self.model.created_at), func.max(self.model.created_at)).where(alive)
        ).one()
        options["created_at"] = {"min": bounds[0], "max": bounds[1]}
        return options

    def _distinct_values(self, parts: Tuple[str, ...], alive) -> List[Any]:
        joins = []
        current = self.model
        for name in parts[:-1]:
            joins.append(getattr(current, name))
            current = sa_inspect(current).relationships[name].mapper.class_

        column = getattr(current, parts[-1])
        statement = select(distinct(column)).select_from(self.model)
        for attr in joins:
            statement = statement.join(attr)
        statement = statement.where(alive, column.isnot(None)).order_by(column)
        return [value for value in self.db.scalars(statement).all() if value != ""]
