from aws_cdk import Duration, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# AWS 公開の Powertools for AWS Lambda (Python) レイヤー（pydantic を含む）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.list_routes = self._create_function(
            "ListRoutesLambda",
            "services.catalog.handlers.list_routes.lambda_handler",
            "catalog-service",
        )

        self.search_trips = self._create_function(
            "SearchTripsLambda",
            "services.booking.handlers.search_trips.lambda_handler",
            "booking-service",
        )

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "services.booking.handlers.get_booking.lambda_handler",
            "booking-service",
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
            "booking-service",
        )

        self.reserve = self._create_function(
            "ReserveBookingLambda",
            "services.booking.handlers.reserve.lambda_handler",
            "booking-service",
        )

        self.cancel = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            "booking-service",
        )

        for fn in [self.list_routes, self.search_trips, self.get_booking, self.list_bookings]:
            table.grant_read_data(fn)

        for fn in [self.reserve, self.cancel]:
            table.grant_read_write_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            timeout=Duration.seconds(15),
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "STORE_CONNECT_TIMEOUT": "2",
                "STORE_READ_TIMEOUT": "5",
                "FARE_CURRENCY": "NGN",
                "MAX_PASSENGERS": "5",
            },
        )
