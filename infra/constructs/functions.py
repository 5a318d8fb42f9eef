import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        credit_limits: str | None = None,
    ) -> None:
        super().__init__(scope, id)

        environment = {
            "TABLE_NAME": table.table_name,
            "POWERTOOLS_SERVICE_NAME": "flight-booking-service",
            "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }
        # 未指定の場合はアプリケーション側の既定の与信枠を使う
        if credit_limits:
            environment["CREDIT_LIMITS"] = credit_limits

        self.book_flight = _lambda.Function(
            self,
            "BookFlightLambda",
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler="services.flight.handlers.book_flight.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment=environment,
        )

        table.grant_read_write_data(self.book_flight)
