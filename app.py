#!/usr/bin/env python3

import aws_cdk as cdk

from bus_booking_stack import BusBookingStack

app = cdk.App()
BusBookingStack(
    app,
    "BusBookingStack",
)

app.synth()
