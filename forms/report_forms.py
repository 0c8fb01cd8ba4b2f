import math

from flask_wtf import FlaskForm
from wtforms import SelectField, FloatField, TextAreaField, HiddenField, SubmitField
from wtforms.validators import (DataRequired, InputRequired, NumberRange, Length, Optional,
                                ValidationError)


class ReportForm(FlaskForm):
    product_code = SelectField("Product", validators=[DataRequired()])
    reported_price = FloatField("Price Found", validators=[InputRequired(), NumberRange(min=0)])
    description = TextAreaField("Report Details", validators=[DataRequired(), Length(max=2000)])
    latitude = HiddenField("Latitude", validators=[Optional()])
    longitude = HiddenField("Longitude", validators=[Optional()])
    submit = SubmitField("Submit Report")

    def validate_reported_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError("Price must be a finite number.")

    def set_product_choices(self, products, lang):
        self.product_code.choices = [("", "")] + [
            (p.code, p.name_for(lang)) for p in products
        ]
