import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import events.models.mixins


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Organization",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("draft", "Draft"), ("public", "Public"), ("disabled", "Disabled")],
                        db_index=True,
                        default="draft",
                        max_length=10,
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=255)),
                (
                    "slug",
                    models.SlugField(
                        blank=True, help_text="Short name used in public URLs.", max_length=255, unique=True
                    ),
                ),
                ("description", models.TextField(blank=True, default="")),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                (
                    "timezone",
                    models.CharField(
                        default="UTC", max_length=64, validators=[events.models.mixins.validate_timezone]
                    ),
                ),
                ("begin", models.DateTimeField(db_index=True)),
                ("end", models.DateTimeField(db_index=True)),
                (
                    "available_seats",
                    models.PositiveIntegerField(default=0, help_text="Total capacity across all categories."),
                ),
                ("free_of_charge", models.BooleanField(default=False)),
                ("currency", models.CharField(default="EUR", help_text="ISO 4217 currency code", max_length=3)),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="events.organization",
                    ),
                ),
            ],
            options={
                "ordering": ["begin", "name"],
                "indexes": [models.Index(fields=["organization", "status"], name="events_even_organiz_2a4c1b_idx")],
            },
        ),
        migrations.CreateModel(
            name="TicketCategory",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("not_active", "Not active")],
                        db_index=True,
                        default="active",
                        max_length=20,
                    ),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("access_restricted", models.BooleanField(db_index=True, default=False)),
                (
                    "inception",
                    models.DateTimeField(blank=True, help_text="When ticket sales begin for this category", null=True),
                ),
                (
                    "expiration",
                    models.DateTimeField(blank=True, help_text="When ticket sales end for this category", null=True),
                ),
                (
                    "bounded",
                    models.BooleanField(default=False, help_text="Whether this category has its own ticket quota."),
                ),
                (
                    "max_tickets",
                    models.PositiveIntegerField(default=0, help_text="Ticket quota, only meaningful when bounded."),
                ),
                ("ordinal", models.PositiveIntegerField(db_index=True, default=0)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ticket_categories",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "ticket categories",
                "ordering": ["event", "ordinal", "name"],
                "constraints": [models.UniqueConstraint(fields=("event", "name"), name="unique_event_category_name")],
            },
        ),
        migrations.CreateModel(
            name="SpecialPrice",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("code", models.CharField(max_length=64, unique=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("free", "Free"),
                            ("pending", "Pending"),
                            ("taken", "Taken"),
                            ("cancelled", "Cancelled"),
                        ],
                        db_index=True,
                        default="free",
                        max_length=20,
                    ),
                ),
                (
                    "ticket_category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="special_prices",
                        to="events.ticketcategory",
                    ),
                ),
            ],
            options={"ordering": ["ticket_category", "code"]},
        ),
        migrations.CreateModel(
            name="PromoCodeDiscount",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("promo_code", models.CharField(db_index=True, max_length=64)),
                (
                    "code_type",
                    models.CharField(
                        choices=[("discount", "Discount"), ("access", "Access")], default="discount", max_length=20
                    ),
                ),
                (
                    "discount_type",
                    models.CharField(
                        choices=[("percentage", "Percentage"), ("fixed_amount", "Fixed amount"), ("none", "None")],
                        default="percentage",
                        max_length=20,
                    ),
                ),
                ("discount_amount", models.PositiveIntegerField(default=0)),
                (
                    "max_usage",
                    models.PositiveIntegerField(blank=True, help_text="Leave empty for unlimited usage.", null=True),
                ),
                ("valid_from", models.DateTimeField(blank=True, null=True)),
                ("valid_to", models.DateTimeField(blank=True, null=True)),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="promo_codes",
                        to="events.organization",
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        blank=True,
                        help_text="Leave empty for a code valid on every event of the organization.",
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="promo_codes",
                        to="events.event",
                    ),
                ),
                (
                    "categories",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Restrict the discount to these categories. Empty means all categories.",
                        related_name="promo_codes",
                        to="events.ticketcategory",
                    ),
                ),
                (
                    "hidden_category",
                    models.ForeignKey(
                        blank=True,
                        help_text="The access-restricted category unlocked by an ACCESS code.",
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="access_codes",
                        to="events.ticketcategory",
                    ),
                ),
            ],
            options={
                "ordering": ["promo_code"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("promo_code", "organization", "event"), name="unique_promo_code_scope"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="TicketReservation",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("in_payment", "In payment"),
                            ("offline_payment", "Offline payment"),
                            ("complete", "Complete"),
                            ("stuck", "Stuck"),
                            ("cancelled", "Cancelled"),
                            ("expired", "Expired"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("expires_at", models.DateTimeField(db_index=True)),
                ("user_language", models.CharField(default="en", max_length=10)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reservations",
                        to="events.event",
                    ),
                ),
                (
                    "promo_code_discount",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="reservations",
                        to="events.promocodediscount",
                    ),
                ),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("acquired", "Acquired"),
                            ("checked_in", "Checked in"),
                            ("released", "Released"),
                            ("cancelled", "Cancelled"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("final_price", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="tickets", to="events.event"
                    ),
                ),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tickets",
                        to="events.ticketcategory",
                    ),
                ),
                (
                    "reservation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tickets",
                        to="events.ticketreservation",
                    ),
                ),
                (
                    "special_price",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="tickets",
                        to="events.specialprice",
                    ),
                ),
            ],
            options={
                "ordering": ["reservation", "created_at"],
                "indexes": [models.Index(fields=["category", "status"], name="events_tick_categor_7d1e3f_idx")],
            },
        ),
        migrations.CreateModel(
            name="ConfigurationSetting",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "key",
                    models.CharField(
                        choices=[
                            ("max_amount_of_tickets_by_reservation", "Max tickets per reservation"),
                            ("display_discount_code_box", "Display discount code box"),
                            ("use_partner_code_instead_of_promotional", "Use partner code instead of promotional"),
                            ("enable_waiting_queue", "Enable waiting queue"),
                            ("enable_pre_registration", "Enable pre-registration"),
                            ("reservation_timeout", "Reservation timeout (minutes)"),
                        ],
                        db_index=True,
                        max_length=64,
                    ),
                ),
                ("value", models.CharField(max_length=255)),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                (
                    "organization",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="configuration",
                        to="events.organization",
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="configuration",
                        to="events.event",
                    ),
                ),
                (
                    "ticket_category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="configuration",
                        to="events.ticketcategory",
                    ),
                ),
            ],
            options={
                "ordering": ["key"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("key", "organization", "event", "ticket_category"),
                        name="unique_configuration_per_scope",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="WaitingQueueSubscription",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("first_name", models.CharField(max_length=150)),
                ("last_name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("user_language", models.CharField(default="en", max_length=10)),
                (
                    "subscription_type",
                    models.CharField(
                        choices=[("pre_sales", "Pre-sales"), ("sold_out", "Sold out")],
                        default="sold_out",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("waiting", "Waiting"),
                            ("pre_reserved", "Pre-reserved"),
                            ("acquired", "Acquired"),
                            ("expired", "Expired"),
                            ("cancelled", "Cancelled"),
                        ],
                        db_index=True,
                        default="waiting",
                        max_length=20,
                    ),
                ),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="waiting_queue",
                        to="events.event",
                    ),
                ),
                (
                    "selected_category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="waiting_queue",
                        to="events.ticketcategory",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("event", "email"), name="unique_waiting_queue_email")
                ],
            },
        ),
    ]
