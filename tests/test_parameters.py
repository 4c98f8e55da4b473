"""Tests for template parameter mapping."""

from email_dispatch.models import EmailRequest
from email_dispatch.parameters import (
    TemplateParameterBuilder,
    build_template_parameters,
    build_template_variables,
)


class TestBuildTemplateParameters:
    """Tests for build_template_parameters."""

    def test_minimal_request_uses_defaults(self):
        """Test sender fields fall back to the default sender."""
        request = EmailRequest(to="alice@example.com", subject="Hi", body="line1\nline2")

        params = build_template_parameters(request)

        assert params == {
            "to_email": "alice@example.com",
            "to_name": "alice",
            "from_name": "Business Manager",
            "from_email": "noreply@businessmanager.com",
            "subject": "Hi",
            "message": "line1\nline2",
            "reply_to": "noreply@businessmanager.com",
        }

    def test_from_and_reply_to(self):
        """Test reply_to falls back to the sender, and wins when given."""
        request = EmailRequest(to="a@example.com", subject="s", body="b", from_email="me@corp.com")

        params = build_template_parameters(request)

        assert params["from_name"] == "me@corp.com"
        assert params["from_email"] == "me@corp.com"
        assert params["reply_to"] == "me@corp.com"

        request.reply_to = "replies@corp.com"
        assert build_template_parameters(request)["reply_to"] == "replies@corp.com"

    def test_cc_and_bcc_joined(self):
        request = EmailRequest(
            to="a@example.com",
            subject="s",
            body="b",
            cc=["c1@example.com", "c2@example.com"],
            bcc=["b1@example.com"],
        )

        params = build_template_parameters(request)

        assert params["cc_emails"] == "c1@example.com, c2@example.com"
        assert params["bcc_emails"] == "b1@example.com"

    def test_empty_cc_and_bcc_are_omitted(self):
        """Test empty lists leave the keys out entirely."""
        request = EmailRequest(to="a@example.com", subject="s", body="b", cc=[], bcc=None)

        params = build_template_parameters(request)

        assert "cc_emails" not in params
        assert "bcc_emails" not in params

    def test_custom_default_sender(self):
        request = EmailRequest(to="a@example.com", subject="s", body="b")

        params = build_template_parameters(
            request, default_from_name="Acme", default_from_email="hello@acme.test"
        )

        assert params["from_name"] == "Acme"
        assert params["reply_to"] == "hello@acme.test"

    def test_to_name_uses_first_at(self):
        request = EmailRequest(to="first.last@example.com", subject="s", body="b")

        assert build_template_parameters(request)["to_name"] == "first.last"


class TestBuildTemplateVariables:
    """Tests for build_template_variables."""

    def test_base_map(self):
        assert build_template_variables("a@example.com") == {"to_email": "a@example.com"}

    def test_variables_and_overrides_take_precedence(self):
        params = build_template_variables(
            "a@example.com",
            {"name": "Alice", "to_email": "other@example.com", "plan": "pro"},
            {"plan": "enterprise"},
        )

        assert params == {"to_email": "other@example.com", "name": "Alice", "plan": "enterprise"}


class TestTemplateParameterBuilder:
    """Tests for TemplateParameterBuilder."""

    def test_keeps_insertion_order(self):
        params = TemplateParameterBuilder().set("b", "1").set("a", "2").build()

        assert list(params) == ["b", "a"]

    def test_set_optional_skips_empty(self):
        params = (
            TemplateParameterBuilder()
            .set_optional("empty", "")
            .set_optional("none", None)
            .set_optional("value", "x")
            .build()
        )

        assert params == {"value": "x"}

    def test_build_returns_copy(self):
        builder = TemplateParameterBuilder().set("a", "1")
        params = builder.build()
        params["b"] = "2"

        assert builder.build() == {"a": "1"}
