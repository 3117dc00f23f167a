import shutil

import pytest

# CDK の合成には Node.js が必要
pytestmark = pytest.mark.skipif(shutil.which("node") is None, reason="node is required")


@pytest.fixture(scope="module")
def template():
    core = pytest.importorskip("aws_cdk")
    assertions = pytest.importorskip("aws_cdk.assertions")
    from bus_booking_stack import BusBookingStack

    app = core.App()
    stack = BusBookingStack(app, "BusBookingStack")
    return assertions.Template.from_stack(stack)


def test_booking_table_has_user_index(template):
    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "BillingMode": "PAY_PER_REQUEST",
            "GlobalSecondaryIndexes": [{"IndexName": "GSI1"}],
        },
    )


def test_functions_created(template):
    template.resource_count_is("AWS::Lambda::Function", 6)
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "services.booking.handlers.reserve.lambda_handler",
            "Runtime": "python3.13",
        },
    )


def test_booking_endpoints_require_cognito(template):
    template.resource_count_is("AWS::ApiGateway::Authorizer", 1)
    template.has_resource_properties(
        "AWS::ApiGateway::Method",
        {"HttpMethod": "POST", "AuthorizationType": "COGNITO_USER_POOLS"},
    )
