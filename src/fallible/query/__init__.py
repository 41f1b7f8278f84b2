"""Comprehension desugaring for every container shape.

Each shape module (option, result, either, try_) exposes the same table:

- select(c, projector)                       == c.map(projector)
- select_many(c, binder)                     == c.and_then(binder)
- select_many(c, binder, result_combiner)    == c.and_then(lambda x: binder(x).map(lambda y: result_combiner(x, y)))
- where(c, predicate)                        Option only: c.filter(predicate)
- where(c, predicate, error)                 failure side carrying error when predicate is false
- where_with(c, predicate, error_factory)    same, error computed as error_factory(value)

Function arguments are checked before the container is touched: None raises
NullArgumentError. Query/query() wraps the table in a fluent chain.
"""

from . import either, option, result, try_
from .builder import Query, query

__all__ = ["option", "result", "either", "try_", "Query", "query"]
