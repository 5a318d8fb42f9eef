from .entity import Entity as Entity
