"""Unit tests for the template registry."""
import threading

import pytest
from snippet_registry.core.exceptions import (
    ConfigurationError, DuplicateNameError, MalformedTemplateError,
    MissingBindingError, NotFoundError, ValidationError
)
from snippet_registry.services.template_registry import TemplateRegistry

@pytest.fixture
def registry():
    """Registry with a greeting template."""
    registry = TemplateRegistry()
    registry.register("greet", "Hello, ${name}!", "Greets someone")
    return registry

class TestRegister:
    """Test template registration."""

    def test_get_returns_registered_values(self, registry):
        """Test get returns exactly the body and description passed to register."""
        template = registry.get("greet")

        assert template.name == "greet"
        assert template.body == "Hello, ${name}!"
        assert template.description == "Greets someone"

    def test_description_is_optional(self):
        """Test registering without a description."""
        registry = TemplateRegistry()
        registry.register("plain", "no placeholders here")

        assert registry.get("plain").description is None

    def test_duplicate_name_keeps_original(self, registry):
        """Test second registration fails and the first stays intact."""
        with pytest.raises(DuplicateNameError) as exc_info:
            registry.register("greet", "Bye, ${name}!", "Other")

        assert exc_info.value.details["name"] == "greet"
        template = registry.get("greet")
        assert template.body == "Hello, ${name}!"
        assert template.description == "Greets someone"
        assert len(registry) == 1

    def test_placeholders_in_first_occurrence_order(self):
        """Test placeholder identifiers are listed once, in body order."""
        registry = TemplateRegistry()
        template = registry.register("t", "${b} ${a} ${b} ${c_1}")

        assert template.placeholders == ("b", "a", "c_1")

    @pytest.mark.parametrize("body,reason", [
        ("Hello, ${name", "unterminated"),
        ("Hello, ${}", "empty"),
        ("${first name}", "invalid"),
        ("${a${b}}", "invalid"),
        ("${1abc}", "invalid"),
    ])
    def test_malformed_body_rejected(self, body, reason):
        """Test malformed placeholder tokens are rejected at registration."""
        registry = TemplateRegistry()

        with pytest.raises(MalformedTemplateError) as exc_info:
            registry.register("bad", body)

        assert reason in exc_info.value.details["reason"]
        assert "bad" not in registry

    def test_empty_name_rejected(self):
        """Test an empty name is a validation error."""
        registry = TemplateRegistry()

        with pytest.raises(ValidationError):
            registry.register("  ", "body")

    def test_unknown_policy_rejected(self):
        """Test constructing a registry with an unknown policy."""
        with pytest.raises(ConfigurationError):
            TemplateRegistry(policy="lenient")

class TestGet:
    """Test template lookup."""

    def test_missing_template(self, registry):
        """Test lookup of an unknown name."""
        with pytest.raises(NotFoundError) as exc_info:
            registry.get("missing")

        assert exc_info.value.message == "unknown template: missing"
        assert exc_info.value.error_code == "TEMPLATE_NOT_FOUND"

    def test_names_sorted(self, registry):
        """Test names are returned sorted."""
        registry.register("alpha", "a")
        registry.register("zeta", "z")

        assert registry.names() == ("alpha", "greet", "zeta")
        assert [t.name for t in registry] == ["alpha", "greet", "zeta"]
        assert "alpha" in registry
        assert "beta" not in registry

class TestRender:
    """Test placeholder substitution."""

    def test_render_single_placeholder(self, registry):
        """Test rendering the greeting."""
        assert registry.render("greet", {"name": "World"}) == "Hello, World!"

    def test_render_missing_binding_strict(self, registry):
        """Test strict policy names the unresolved placeholder."""
        with pytest.raises(MissingBindingError) as exc_info:
            registry.render("greet", {})

        assert exc_info.value.details["placeholder"] == "name"
        assert "name" in exc_info.value.message

    def test_render_reports_first_missing_placeholder(self):
        """Test the first unresolved placeholder in body order is reported."""
        registry = TemplateRegistry()
        registry.register("t", "${a} ${b} ${c}")

        with pytest.raises(MissingBindingError) as exc_info:
            registry.render("t", {"a": "1"})

        assert exc_info.value.details["placeholder"] == "b"

    def test_render_unknown_template(self, registry):
        """Test rendering an unknown template."""
        with pytest.raises(NotFoundError):
            registry.render("missing", {"name": "World"})

    def test_render_two_placeholders(self):
        """Test a body with two distinct placeholders."""
        registry = TemplateRegistry()
        registry.register("pair", "${a}-${b}")

        assert registry.render("pair", {"a": "1", "b": "2"}) == "1-2"

    def test_render_repeated_placeholder(self):
        """Test every occurrence of a placeholder is replaced."""
        registry = TemplateRegistry()
        registry.register("t", "${x}+${x}=${y}")

        assert registry.render("t", {"x": "1", "y": "2"}) == "1+1=2"

    def test_render_without_placeholders(self):
        """Test a body without placeholders renders unchanged."""
        registry = TemplateRegistry()
        body = "class Foo {\n    void bar() {}\n}\n"
        registry.register("static", body)

        assert registry.render("static", {}) == body
        assert registry.render("static", {"unused": "value"}) == body

    def test_render_is_idempotent(self, registry):
        """Test rendering twice gives identical output."""
        first = registry.render("greet", {"name": "World"})
        second = registry.render("greet", {"name": "World"})

        assert first == second

    def test_binding_values_are_not_rescanned(self, registry):
        """Test placeholder syntax inside a value is inserted verbatim."""
        assert registry.render("greet", {"name": "${other}"}) == "Hello, ${other}!"

    def test_keep_policy_leaves_placeholder(self):
        """Test keep policy leaves unresolved placeholders in the output."""
        registry = TemplateRegistry(policy="keep")
        registry.register("t", "${a}-${b}")

        assert registry.render("t", {"a": "1"}) == "1-${b}"

    def test_policy_override_per_call(self, registry):
        """Test a per-call policy overrides the registry policy."""
        assert registry.render("greet", {}, policy="keep") == "Hello, ${name}!"

        with pytest.raises(ValidationError):
            registry.render("greet", {}, policy="lenient")

class TestConcurrentAccess:
    """Test registration while other threads read."""

    def test_readers_see_complete_templates(self, registry):
        """Test readers never observe a partially registered template."""
        errors = []

        def reader():
            for _ in range(200):
                for name in registry.names():
                    template = registry.get(name)
                    if template.body is None:
                        errors.append(name)
                registry.render("greet", {"name": "x"})

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for i in range(100):
            registry.register(f"t{i}", f"value ${{v{i}}}")
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 101
        assert registry.render("t42", {"v42": "ok"}) == "value ok"
