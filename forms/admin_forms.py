import math

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, FloatField, SubmitField
from wtforms.validators import DataRequired, Email, Length, NumberRange, Optional, ValidationError

from models.job import JOB_TYPES
from models.user import User

ROLE_CHOICES = [("admin", "Admin"), ("staff", "Staff"), ("donor", "Donor")]
JOB_TYPE_CHOICES = [(job_type, job_type) for job_type in JOB_TYPES]


class UserAddForm(FlaskForm):
    username = StringField("Username", validators=[DataRequired(), Length(max=64)])
    name = StringField("Full Name", validators=[DataRequired(), Length(max=120)])
    role = SelectField("Role", choices=ROLE_CHOICES, default="staff",
                       validators=[DataRequired()])
    submit = SubmitField("Add User")

    def validate_username(self, field):
        if User.get_by_username(field.data):
            raise ValidationError("username_taken")


class ProductAddForm(FlaskForm):
    code = StringField("Code", validators=[DataRequired(), Length(max=32)])
    name_ar = StringField("Name (AR)", validators=[Optional(), Length(max=200)])
    name_en = StringField("Name (EN)", validators=[Optional(), Length(max=200)])
    price = FloatField("Price", default=0, validators=[Optional(), NumberRange(min=0)])
    submit = SubmitField("Add Product")

    def validate_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError("Price must be a finite number.")


class NewsAddForm(FlaskForm):
    title_ar = StringField("Title (Arabic)", validators=[Optional(), Length(max=200)])
    title_en = StringField("Title (English)", validators=[Optional(), Length(max=200)])
    desc_ar = TextAreaField("Description (Arabic)", validators=[Optional(), Length(max=2000)])
    desc_en = TextAreaField("Description (English)", validators=[Optional(), Length(max=2000)])
    submit = SubmitField("Publish News")


class JobAddForm(FlaskForm):
    title_ar = StringField("Title (Arabic)", validators=[Optional(), Length(max=200)])
    title_en = StringField("Title (English)", validators=[Optional(), Length(max=200)])
    job_type = SelectField("Type", choices=JOB_TYPE_CHOICES, default="Full-time",
                           validators=[DataRequired()])
    submit = SubmitField("Post Job")


class ProfileForm(FlaskForm):
    mission_ar = TextAreaField("Mission (AR)", validators=[DataRequired()])
    mission_en = TextAreaField("Mission (EN)", validators=[DataRequired()])
    vision_ar = TextAreaField("Vision (AR)", validators=[DataRequired()])
    vision_en = TextAreaField("Vision (EN)", validators=[DataRequired()])
    about_ar = TextAreaField("About (AR)", validators=[DataRequired()])
    about_en = TextAreaField("About (EN)", validators=[DataRequired()])
    phone = StringField("Phone", validators=[DataRequired(), Length(max=40)])
    email = StringField("Email", validators=[DataRequired(), Email()])
    address_ar = StringField("Address (AR)", validators=[DataRequired()])
    address_en = StringField("Address (EN)", validators=[DataRequired()])
    submit = SubmitField("Save Changes")


class DeleteForm(FlaskForm):
    """CSRF-only form backing the per-row delete buttons."""
    submit = SubmitField("Delete")
