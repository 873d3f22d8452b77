from tierprice.ddd.commands import Command, Message, Query
from tierprice.ddd.domain_module import DomainModule

__all__ = ["Command", "Message", "Query", "DomainModule"]
