from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cognito as cognito
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    書き込みと利用者別の照会は Cognito オーソライザーで保護する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: Functions,
        user_pool: cognito.IUserPool,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Bus Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=50,
                throttling_rate_limit=20,
            ),
        )

        authorizer = apigw.CognitoUserPoolsAuthorizer(
            self,
            "PassengerAuthorizer",
            cognito_user_pools=[user_pool],
        )
        protected = {
            "authorizer": authorizer,
            "authorization_type": apigw.AuthorizationType.COGNITO,
        }

        # GET /routes
        routes = self.rest_api.root.add_resource("routes")
        routes.add_method("GET", apigw.LambdaIntegration(functions.list_routes))

        # GET /trips/search
        trips = self.rest_api.root.add_resource("trips")
        trips.add_resource("search").add_method(
            "GET", apigw.LambdaIntegration(functions.search_trips)
        )

        # GET /bookings, POST /bookings
        bookings = self.rest_api.root.add_resource("bookings")
        bookings.add_method(
            "GET", apigw.LambdaIntegration(functions.list_bookings), **protected
        )
        bookings.add_method(
            "POST", apigw.LambdaIntegration(functions.reserve), **protected
        )

        # GET /bookings/{booking_number}
        booking_by_number = bookings.add_resource("{booking_number}")
        booking_by_number.add_method(
            "GET", apigw.LambdaIntegration(functions.get_booking)
        )

        # POST /bookings/by-id/{booking_id}/cancel
        # パスパラメータ名は同一階層で共有されるため by-id 配下に置く
        by_id = bookings.add_resource("by-id").add_resource("{booking_id}")
        by_id.add_resource("cancel").add_method(
            "POST", apigw.LambdaIntegration(functions.cancel), **protected
        )
