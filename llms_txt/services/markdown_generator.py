"""
Markdown documentation generator for llms.txt.
Renders an OpenAPI/Swagger specification as one Markdown document.

Every section generator is a pure function returning a Markdown fragment,
or an empty string when its part of the specification is absent.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from llms_txt.services.openapi_parser import count_endpoints, iter_operations
from llms_txt.utils.schema_resolver import ref_name, resolve_parameter_type, resolve_schema_type

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "API Documentation"
DEPRECATED_NOTICE = "**⚠️ DEPRECATED**"


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _sequence(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _table_cell(value: Any) -> str:
    # Pipes and line breaks would end the table row
    return _text(value).replace("|", "\\|").replace("\r\n", " ").replace("\n", " ")


def format_json_block(payload: Any) -> str:
    """
    Serialize a value as a fenced, pretty-printed JSON block.
    """
    json_text = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
    return f"```json\n{json_text}\n```"


# Document header


def generate_title(openapi_spec: Dict[str, Any]) -> str:
    info = _mapping(openapi_spec.get("info"))
    title = info.get("title") or DEFAULT_TITLE
    version = info.get("version") or ""
    suffix = f" (v{version})" if version else ""
    return f"# {title}{suffix}"


def generate_description(openapi_spec: Dict[str, Any]) -> str:
    info = _mapping(openapi_spec.get("info"))
    return _text(info.get("description") or "")


def generate_contact(openapi_spec: Dict[str, Any]) -> str:
    contact = _mapping(openapi_spec.get("info")).get("contact")
    if not isinstance(contact, dict):
        return ""

    section = ["## Contact\n\n"]
    for key, label in (("name", "Name"), ("email", "Email"), ("url", "URL")):
        if contact.get(key):
            section.append(f"**{label}**: {contact[key]}\n\n")
    return "".join(section)


def generate_license(openapi_spec: Dict[str, Any]) -> str:
    license_info = _mapping(openapi_spec.get("info")).get("license")
    if not isinstance(license_info, dict):
        return ""

    section = f"## License\n\n**{_text(license_info.get('name'))}**"
    if license_info.get("url"):
        section += f" - {license_info['url']}"
    return section


def generate_external_docs(openapi_spec: Dict[str, Any]) -> str:
    docs = openapi_spec.get("externalDocs")
    if not isinstance(docs, dict):
        return ""

    label = docs.get("description") or "Additional documentation"
    return f"## External Documentation\n\n{label}: {_text(docs.get('url'))}"


def generate_servers(openapi_spec: Dict[str, Any]) -> str:
    """
    List servers with their description and URL template variables.
    """
    servers = [server for server in _sequence(openapi_spec.get("servers")) if isinstance(server, dict)]
    if not servers:
        return ""

    entries: List[str] = []
    for server in servers:
        entry = f"- {_text(server.get('url'))}"
        if server.get("description"):
            entry += f" - {server['description']}"

        variables = server.get("variables")
        if isinstance(variables, dict):
            entry += "\n  - Variables:"
            for name, variable in variables.items():
                variable = _mapping(variable)
                entry += (
                    f"\n    - `{name}`: {_text(variable.get('description') or '')}"
                    f" (default: `{_text(variable.get('default'))}`)"
                )
        entries.append(entry)

    return "## Servers\n\n" + "\n".join(entries)


def _security_scheme_entry(name: str, scopes: Any) -> str:
    entry = f"**{name}**"
    if isinstance(scopes, list) and scopes:
        entry += f" (scopes: {', '.join(_text(scope) for scope in scopes)})"
    return entry


def generate_security(openapi_spec: Dict[str, Any]) -> str:
    """
    Render the document-level security requirements.
    Each requirement is an alternative; the schemes listed inside it apply together.
    """
    requirements = _sequence(openapi_spec.get("security"))
    if not requirements:
        return ""

    section = ["## Security\n\n"]
    for index, requirement in enumerate(requirements, start=1):
        section.append(f"### Requirement {index}\n\n")
        for name, scopes in _mapping(requirement).items():
            section.append(f"- {_security_scheme_entry(name, scopes)}\n")
        section.append("\n")
    return "".join(section)


def generate_tags(openapi_spec: Dict[str, Any]) -> str:
    tags = _sequence(openapi_spec.get("tags"))
    if not tags:
        return ""

    section = ["## Tags\n\n"]
    for tag in tags:
        if not isinstance(tag, dict):
            logger.warning(f"Skipping invalid tag entry: expected object, got {type(tag).__name__}")
            continue
        section.append(f"### {_text(tag.get('name'))}\n\n")
        if tag.get("description"):
            section.append(f"{tag['description']}\n\n")
        external_docs = tag.get("externalDocs")
        if isinstance(external_docs, dict):
            section.append(f"External Docs: {_text(external_docs.get('url'))}\n\n")
    return "".join(section)


# Endpoints


def generate_paths(openapi_spec: Dict[str, Any]) -> str:
    """
    Render every operation under `paths` in document order.
    A present but empty `paths` object still produces the section header.
    """
    paths = openapi_spec.get("paths")
    if paths is None:
        return ""

    section = ["## Endpoints\n\n"]
    for path, path_item in _mapping(paths).items():
        for method, operation in iter_operations(path_item):
            section.append(generate_endpoint(path, method, operation))
    return "".join(section)


def generate_webhooks(openapi_spec: Dict[str, Any]) -> str:
    """
    Render webhooks. Their operations have no path, so no method/path line is printed.
    """
    webhooks = openapi_spec.get("webhooks")
    if webhooks is None:
        return ""

    section = ["## Webhooks\n\n"]
    for name, webhook in _mapping(webhooks).items():
        section.append(f"### {name}\n\n")
        for method, operation in iter_operations(webhook):
            section.append(generate_endpoint("", method, operation))
    return "".join(section)


def generate_endpoint(path: str, method: str, operation: Dict[str, Any]) -> str:
    """
    Render a single operation of a path or webhook.

    Args:
        path: Path template, empty for webhooks.
        method: Upper-case HTTP method.
        operation: OpenAPI operation object.

    Returns:
        Markdown block for the operation, ending with a blank line.
    """
    summary = operation.get("summary") or f"{method} {path}".rstrip()
    section = [f"### {summary}\n\n"]

    if path:
        section.append(f"**{method}** `{path}`\n\n")

    tags = _sequence(operation.get("tags"))
    if tags:
        section.append(f"**Tags**: {', '.join(_text(tag) for tag in tags)}\n\n")

    if operation.get("description"):
        section.append(f"{operation['description']}\n\n")

    if operation.get("operationId"):
        section.append(f"**Operation ID**: `{operation['operationId']}`\n\n")

    if operation.get("deprecated"):
        section.append(f"{DEPRECATED_NOTICE}\n\n")

    security = operation.get("security")
    if isinstance(security, list):
        section.append(generate_endpoint_security(security))

    parameters = _sequence(operation.get("parameters"))
    if parameters:
        section.append(generate_parameters(parameters))

    request_body = operation.get("requestBody")
    if isinstance(request_body, dict):
        section.append(generate_request_body(request_body))

    responses = operation.get("responses")
    if isinstance(responses, dict):
        section.append(generate_responses(responses))

    callbacks = operation.get("callbacks")
    if isinstance(callbacks, dict):
        section.append(generate_callbacks(callbacks))

    section.append("\n")
    return "".join(section)


def generate_endpoint_security(security: List[Any]) -> str:
    """
    Render operation-level security. It replaces, and is never merged with,
    the document-level requirements.
    """
    section = ["#### Security\n\n"]
    for index, requirement in enumerate(security, start=1):
        section.append(f"- Requirement {index}:\n")
        for name, scopes in _mapping(requirement).items():
            section.append(f"  - {_security_scheme_entry(name, scopes)}\n")
    section.append("\n")
    return "".join(section)


def generate_parameters(parameters: List[Any]) -> str:
    """
    Render parameters as a Markdown table in declaration order.
    """
    section = [
        "#### Parameters\n\n",
        "| Name | In | Type | Required | Description |\n",
        "|------|----|------|----------|-------------|\n",
    ]

    for param in parameters:
        if not isinstance(param, dict):
            logger.warning(f"Skipping invalid parameter: expected object, got {type(param).__name__}")
            continue
        name = param.get("name")
        if not name and param.get("$ref"):
            name = ref_name(param["$ref"])
        required = "Yes" if param.get("required") else "No"
        section.append(
            f"| {_table_cell(name)} | {_table_cell(param.get('in'))} | "
            f"{_table_cell(resolve_parameter_type(param))} | {required} | "
            f"{_table_cell(param.get('description'))} |\n"
        )

    section.append("\n")
    return "".join(section)


def _format_content(content: Dict[str, Any], indent: str = "") -> str:
    lines = []
    for media_type, media in content.items():
        lines.append(f"{indent}- `{media_type}`\n")
        schema = _mapping(media).get("schema")
        if schema is not None:
            lines.append(f"{indent}  - Type: {resolve_schema_type(schema)}\n")
    return "".join(lines)


def _format_request_body_details(request_body: Dict[str, Any]) -> str:
    section = []
    if request_body.get("description"):
        section.append(f"{request_body['description']}\n\n")

    # Only required bodies are marked; no line means optional
    if request_body.get("required"):
        section.append("**Required**: Yes\n\n")

    content = request_body.get("content")
    if isinstance(content, dict):
        section.append("**Content Types**:\n\n")
        section.append(_format_content(content))
        section.append("\n")
    return "".join(section)


def generate_request_body(request_body: Dict[str, Any]) -> str:
    return "#### Request Body\n\n" + _format_request_body_details(request_body)


def _format_response_details(response: Dict[str, Any]) -> str:
    section = []
    headers = response.get("headers")
    if isinstance(headers, dict):
        section.append("  Headers:\n")
        for header_name, header in headers.items():
            section.append(f"  - `{header_name}`: {_text(_mapping(header).get('description'))}\n")
        section.append("\n")

    content = response.get("content")
    if isinstance(content, dict):
        section.append("  Content Types:\n")
        section.append(_format_content(content, indent="  "))
        section.append("\n")
    return "".join(section)


def generate_responses(responses: Dict[str, Any]) -> str:
    """
    Render responses keyed by status code, in document order.
    """
    section = ["#### Responses\n\n"]
    for code, response in responses.items():
        response = _mapping(response)
        section.append(f"**{code}**: {_text(response.get('description'))}\n\n")
        section.append(_format_response_details(response))
    return "".join(section)


def generate_callbacks(callbacks: Dict[str, Any]) -> str:
    section = ["#### Callbacks\n\n"]
    for name, callback in callbacks.items():
        section.append(f"**{name}**\n\n")
        for expression, path_item in _mapping(callback).items():
            section.append(f"- Expression: `{expression}`\n")
            for method, operation in iter_operations(path_item):
                section.append(f"  - {method}: {_text(operation.get('summary'))}\n")
        section.append("\n")
    return "".join(section)


# Components


def _component_section(
    components: Dict[str, Any],
    key: str,
    title: str,
    render_entry: Callable[[Any], str],
) -> str:
    entries = components.get(key)
    if entries is None:
        return ""

    section = [f"## {title}\n\n"]
    for name, definition in _mapping(entries).items():
        section.append(f"### {name}\n\n")
        section.append(render_entry(definition))
    return "".join(section)


def _format_schema_component(schema: Any) -> str:
    return format_json_block(schema) + "\n\n"


def _format_security_scheme_component(definition: Any) -> str:
    scheme = _mapping(definition)
    section = [f"**Type**: {_text(scheme.get('type'))}\n\n"]
    if scheme.get("description"):
        section.append(f"{scheme['description']}\n\n")

    for key, label in (
        ("scheme", "Scheme"),
        ("bearerFormat", "Bearer Format"),
        ("in", "In"),
        ("name", "Name"),
        ("openIdConnectUrl", "OpenID Connect URL"),
    ):
        if scheme.get(key):
            section.append(f"**{label}**: {scheme[key]}\n\n")

    flows = scheme.get("flows")
    if isinstance(flows, dict) and flows:
        section.append("**Flows**:\n\n")
        for flow_name, flow in flows.items():
            flow = _mapping(flow)
            section.append(f"- `{flow_name}`\n")
            for key, label in (
                ("authorizationUrl", "Authorization URL"),
                ("tokenUrl", "Token URL"),
                ("refreshUrl", "Refresh URL"),
            ):
                if flow.get(key):
                    section.append(f"  - {label}: {flow[key]}\n")
            scopes = flow.get("scopes")
            if isinstance(scopes, dict) and scopes:
                section.append("  - Scopes:\n")
                for scope, scope_description in scopes.items():
                    section.append(f"    - `{scope}`: {_text(scope_description)}\n")
        section.append("\n")
    return "".join(section)


def _format_response_component(definition: Any) -> str:
    response = _mapping(definition)
    section = []
    if response.get("description"):
        section.append(f"{response['description']}\n\n")
    section.append(_format_response_details(response))
    return "".join(section)


def _format_parameter_component(definition: Any) -> str:
    param = _mapping(definition)
    section = []
    if param.get("in"):
        section.append(f"**In**: {param['in']}\n\n")
    section.append(f"**Required**: {'Yes' if param.get('required') else 'No'}\n\n")
    if param.get("schema") is not None or param.get("type"):
        section.append(f"**Type**: {resolve_parameter_type(param)}\n\n")
    if param.get("description"):
        section.append(f"{param['description']}\n\n")
    return "".join(section)


def _format_example_component(definition: Any) -> str:
    example = _mapping(definition)
    section = []
    if example.get("summary"):
        section.append(f"**Summary**: {example['summary']}\n\n")
    if example.get("description"):
        section.append(f"{example['description']}\n\n")
    if example.get("externalValue"):
        section.append(f"**External Value**: {example['externalValue']}\n\n")
    if "value" in example:
        section.append(format_json_block(example["value"]) + "\n\n")
    return "".join(section)


def _format_request_body_component(definition: Any) -> str:
    return _format_request_body_details(_mapping(definition))


def _format_header_component(definition: Any) -> str:
    header = _mapping(definition)
    section = []
    if header.get("description"):
        section.append(f"{header['description']}\n\n")
    if header.get("schema") is not None or header.get("type"):
        section.append(f"**Type**: {resolve_parameter_type(header)}\n\n")
    return "".join(section)


def _format_link_component(definition: Any) -> str:
    link = _mapping(definition)
    section = []
    if link.get("operationId"):
        section.append(f"**Operation ID**: `{link['operationId']}`\n\n")
    if link.get("operationRef"):
        section.append(f"**Operation Ref**: `{link['operationRef']}`\n\n")
    if link.get("description"):
        section.append(f"{link['description']}\n\n")
    return "".join(section)


def generate_schemas(components: Dict[str, Any]) -> str:
    return _component_section(components, "schemas", "Schemas", _format_schema_component)


def generate_security_schemes(components: Dict[str, Any]) -> str:
    return _component_section(
        components, "securitySchemes", "Security Schemes", _format_security_scheme_component
    )


def generate_response_components(components: Dict[str, Any]) -> str:
    return _component_section(components, "responses", "Response Components", _format_response_component)


def generate_parameter_components(components: Dict[str, Any]) -> str:
    return _component_section(components, "parameters", "Parameter Components", _format_parameter_component)


def generate_example_components(components: Dict[str, Any]) -> str:
    return _component_section(components, "examples", "Example Components", _format_example_component)


def generate_request_body_components(components: Dict[str, Any]) -> str:
    return _component_section(
        components, "requestBodies", "Request Body Components", _format_request_body_component
    )


def generate_header_components(components: Dict[str, Any]) -> str:
    return _component_section(components, "headers", "Header Components", _format_header_component)


def generate_link_components(components: Dict[str, Any]) -> str:
    return _component_section(components, "links", "Link Components", _format_link_component)


COMPONENT_GENERATORS: Tuple[Callable[[Dict[str, Any]], str], ...] = (
    generate_schemas,
    generate_security_schemes,
    generate_response_components,
    generate_parameter_components,
    generate_example_components,
    generate_request_body_components,
    generate_header_components,
    generate_link_components,
)


def generate_components(openapi_spec: Dict[str, Any]) -> str:
    """
    Render reusable components, one section per collection that is present.
    """
    components = openapi_spec.get("components")
    if components is None:
        return ""

    components = _mapping(components)
    sections = [generator(components) for generator in COMPONENT_GENERATORS]
    return "\n\n".join(section for section in sections if section)


SECTION_GENERATORS: Tuple[Callable[[Dict[str, Any]], str], ...] = (
    generate_title,
    generate_description,
    generate_contact,
    generate_license,
    generate_external_docs,
    generate_servers,
    generate_security,
    generate_tags,
    generate_paths,
    generate_webhooks,
    generate_components,
)


class OpenAPIToMarkdownConverter:
    """
    Converts an OpenAPI specification into a Markdown document.

    The converter only holds a reference to the specification and never
    modifies it, so `convert` returns the same text on every call.
    """

    def __init__(self, openapi_spec: Dict[str, Any]) -> None:
        self._spec = openapi_spec

    @property
    def spec(self) -> Dict[str, Any]:
        return self._spec

    def convert(self) -> str:
        """
        Run the section generators in document order and join the non-empty
        fragments with a blank line.

        Raises:
            ValueError: If the specification root is not an object.
        """
        if not isinstance(self._spec, dict):
            raise ValueError(
                f"OpenAPI specification must be an object, got {type(self._spec).__name__}"
            )

        sections = [generator(self._spec) for generator in SECTION_GENERATORS]
        return "\n\n".join(section for section in sections if section)


def generate_markdown_from_openapi(openapi_spec: Dict[str, Any]) -> str:
    """
    Convert an OpenAPI specification into Markdown.

    Args:
        openapi_spec: OpenAPI 3.x (or Swagger 2.0) specification dictionary

    Returns:
        Generated Markdown documentation string
    """
    markdown = OpenAPIToMarkdownConverter(openapi_spec).convert()
    logger.info(
        f"Generated documentation for {count_endpoints(openapi_spec)} endpoints "
        f"({len(markdown)} characters)"
    )
    return markdown


def compose_document(markdown: str, header: Optional[str] = None, footer: Optional[str] = None) -> str:
    """
    Wrap a generated document with optional header and footer text,
    each separated from the document by a blank line.
    """
    document = markdown
    if header:
        document = f"{header}\n\n{document}"
    if footer:
        document = f"{document}\n\n{footer}"
    return document
