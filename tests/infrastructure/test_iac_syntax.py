"""
Test suite for IAC syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. Component modules import cleanly
3. Component classes inherit from pulumi.ComponentResource
4. Output dataclasses are properly defined
"""

import ast
from dataclasses import is_dataclass

import pulumi


class TestIacSyntaxValidation:
    """Validate Python syntax in all IAC modules."""

    def test_all_iac_files_have_valid_syntax(self, python_files_in_iac):
        """All Python files in IAC directory should parse without syntax errors."""
        errors = []

        for py_file in python_files_in_iac:
            try:
                ast.parse(py_file.read_text())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_main_entry_point_has_main_function(self, iac_project_root):
        """Main entry point should define a documented main function."""
        # __main__.py calls main() on import, which needs a Pulumi stack
        tree = ast.parse((iac_project_root / "__main__.py").read_text())

        main_func = next(
            (node for node in ast.walk(tree)
             if isinstance(node, ast.FunctionDef) and node.name == "main"),
            None,
        )

        assert main_func is not None, "main() function not found in __main__.py"
        assert ast.get_docstring(main_func) is not None
        assert ast.get_docstring(tree) is not None


class TestIacComponentStructure:
    """Validate component class structure and inheritance."""

    def test_components_are_component_resources(self):
        """Every component subclasses pulumi.ComponentResource."""
        from IAC.components.compute.story_lambda import StoryLambdaComponent
        from IAC.components.edge.api_gateway import ApiGatewayComponent
        from IAC.components.security.iam_roles import IamRolesComponent
        from IAC.components.security.secrets_manager import SecretsManagerComponent
        from IAC.components.storage.ecr_repository import EcrRepositoryComponent

        for component in (
            StoryLambdaComponent,
            ApiGatewayComponent,
            IamRolesComponent,
            SecretsManagerComponent,
            EcrRepositoryComponent,
        ):
            assert issubclass(component, pulumi.ComponentResource)
            assert hasattr(component, "get_outputs")

    def test_output_dataclasses(self):
        """Output classes are dataclasses with the expected fields."""
        from IAC.components.compute.story_lambda import LambdaOutputs
        from IAC.components.edge.api_gateway import ApiGatewayOutputs
        from IAC.components.security.iam_roles import IamRoleOutputs
        from IAC.components.security.secrets_manager import SecretsOutputs
        from IAC.components.storage.ecr_repository import EcrRepositoryOutputs

        expected = {
            LambdaOutputs: {"function_arn", "function_name", "invoke_arn"},
            ApiGatewayOutputs: {"api_endpoint", "api_id", "story_url"},
            IamRoleOutputs: {"lambda_role_arn"},
            SecretsOutputs: {"langfuse_secret_arn"},
            EcrRepositoryOutputs: {"repository_url", "repository_arn", "repository_name"},
        }
        for outputs_cls, fields in expected.items():
            assert is_dataclass(outputs_cls)
            assert set(outputs_cls.__dataclass_fields__) == fields
