"""
Validation schemas for the Newsletter API.

This module defines the marshmallow schemas used to deserialize the
subscription form and the confirmation query string. Schemas only check shape
and format; the content rules for names and tokens live in the service layer.
"""

from marshmallow import Schema, fields, validate, EXCLUDE

# --- Base Schema ---

class BaseSchema(Schema):
    """Base schema with common configuration for all schemas."""

    class Meta:
        # Exclude unknown fields by default for security
        unknown = EXCLUDE


class SubscriptionFormSchema(BaseSchema):
    """Schema for the form-encoded subscription request."""

    name = fields.String(required=True)
    email = fields.Email(required=True, validate=validate.Length(max=255))


class ConfirmationParametersSchema(BaseSchema):
    """Schema for the subscription confirmation query string."""

    subscription_token = fields.String(required=True)


subscription_form_schema = SubscriptionFormSchema()
confirmation_parameters_schema = ConfirmationParametersSchema()
