from typing import Literal, List, Optional
from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel

Severity = Literal["critical", "high", "medium", "low"]
VersionSource = Literal["generator-meta", "wp-emoji", "asset-version", "unknown"]

SEVERITY_RANK = {"critical": 0, "high": 1, "medium": 2, "low": 3}


class Record(BaseModel):
    """Immutable base for report records; camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class VulnEntry(Record):
    id: str
    severity: Severity
    description: str


class Indicators(Record):
    wp_content: bool = False
    wp_includes: bool = False
    generator_meta: bool = False
    wp_emoji: bool = False
    wp_json: bool = False

    def count(self) -> int:
        return sum(1 for v in self.model_dump().values() if v)


class DetectionResult(Record):
    indicators: Indicators
    is_wordpress: bool = Field(alias="isWordPress")
    confidence: int = Field(ge=0, le=100)


class VersionInfo(Record):
    version: Optional[str] = None
    source: VersionSource = "unknown"


class CoreVersion(Record):
    detected: Optional[str] = None
    source: VersionSource = "unknown"
    vulnerabilities: List[VulnEntry] = Field(default_factory=list)


class ExposedFile(Record):
    path: str
    name: str
    critical: bool
    exposed: bool = False
    status_code: int = 0


class XmlRpcStatus(Record):
    enabled: bool = False
    methods: List[str] = Field(default_factory=list)
    pingback_enabled: bool = False
    total_methods: int = 0


class WpUser(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class UserEnumerationResult(Record):
    rest_api_exposed: bool = False
    author_archives_enabled: bool = False
    users_found: List[WpUser] = Field(default_factory=list)


class RestApiStatus(Record):
    exposed: bool = False
    namespaces: List[str] = Field(default_factory=list)
    name: Optional[str] = None
    description: Optional[str] = None


class PluginRecord(Record):
    slug: str
    name: str
    version: Optional[str] = None
    vulnerabilities: List[VulnEntry] = Field(default_factory=list)
    source: Optional[Literal["html"]] = None


class ThemeRecord(Record):
    slug: str
    name: str
    version: Optional[str] = None


class Recommendation(Record):
    severity: Severity
    title: str
    description: str


class SecurityReport(Record):
    is_wordpress: Literal[True] = Field(default=True, alias="isWordPress")
    detection: DetectionResult
    version: CoreVersion
    theme: Optional[ThemeRecord] = None
    plugins: List[PluginRecord] = Field(default_factory=list)
    exposed_files: List[ExposedFile] = Field(default_factory=list)
    xml_rpc: XmlRpcStatus = Field(default_factory=XmlRpcStatus)
    user_enumeration: UserEnumerationResult = Field(default_factory=UserEnumerationResult)
    directory_listing: List[str] = Field(default_factory=list)
    rest_api: RestApiStatus = Field(default_factory=RestApiStatus)
    security_score: Optional[int] = Field(default=None, ge=0, le=100)
    score_deductions: List[str] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)


class SkippedScan(Record):
    is_wordpress: Literal[False] = Field(default=False, alias="isWordPress")
    skipped: str


class ScanRequest(BaseModel):
    url: HttpUrl


class TechStack(BaseModel):
    technologies: List[str] = Field(default_factory=list)
