"""
apps.stripe_demo.forms
"""
from django import forms

from . import validators
from .translations import format_message


class StripeConfigForm(forms.Form):
    """Admin form for replacing the stored Stripe key."""

    stripe_key = forms.CharField(
        max_length=255,
        required=False,
        widget=forms.PasswordInput(
            render_value=False,
            attrs={"autocomplete": "off", "size": 60},
        ),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        field = self.fields["stripe_key"]
        field.label = format_message("config.key.label")
        field.help_text = format_message("config.key.hint")
        field.widget.attrs["placeholder"] = format_message("config.key.placeholder")

    def clean_stripe_key(self) -> str:
        try:
            return validators.clean_stripe_key(self.cleaned_data.get("stripe_key"))
        except validators.StripeKeyValidationError as exc:
            raise forms.ValidationError(format_message(exc.message_id), code=exc.rule)
