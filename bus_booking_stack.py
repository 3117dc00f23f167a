from aws_cdk import RemovalPolicy, Stack
from aws_cdk import aws_cognito as cognito
from constructs import Construct

from infra.constructs import Api, Database, Functions


class BusBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        user_pool = cognito.UserPool(
            self,
            "PassengerUserPool",
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            removal_policy=RemovalPolicy.RETAIN,
        )

        fns = Functions(self, "Functions", table=database.table)

        Api(self, "Api", functions=fns, user_pool=user_pool)
