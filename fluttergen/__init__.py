"""fluttergen -- Flutter project scaffolding from a declarative configuration.

Resolves a project configuration (name, organisation identifier,
architecture, state management, features, modules) into a complete
``GenerationPlan`` and then renders that plan to disk with Jinja2 templates.

Quick usage::

    from fluttergen.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    project_root = await generator.generate(
        {
            "project_name": "demo_app",
            "bundle_identifier": "com.example.demo",
            "architecture": "MVC",
            "state_management": "Provider",
            "features": [],
            "modules": ["Network Layer"],
        },
        "/tmp/output",
    )
"""

__version__ = "0.3.0"
