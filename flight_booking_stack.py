import json

from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Database, Functions, Layers


class FlightBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        credit_limits: dict[str, float] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            credit_limits=json.dumps(credit_limits) if credit_limits else None,
        )
