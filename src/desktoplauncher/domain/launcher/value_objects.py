"""Value objects describing a freedesktop launcher (``.desktop`` entry)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Mapping, Type, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from desktoplauncher.app.install.service import InstallResult

FILE_NAME_PATTERN = re.compile(r"[a-z][a-z0-9]*")
MIME_PATTERN = re.compile(r"[A-Za-z0-9][\w.+-]*/[A-Za-z0-9][\w.+-]*", re.ASCII)
LANG_TAG_LENGTH = (2, 3)


class LauncherValidationError(ValueError):
    """Raised when a launcher field is rejected."""


class LauncherType(Enum):
    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"

    @property
    def label(self) -> str:
        return self.value


class CategoryTier(IntEnum):
    """Classification of menu categories by the freedesktop menu spec."""

    CORE = 1
    ADDITIONAL = 2
    RESERVED = 3


class Category(Enum):
    """Menu categories; each value is ``(tier, label)``."""

    AUDIOVIDEO = (CategoryTier.CORE, "AudioVideo")
    AUDIO = (CategoryTier.CORE, "Audio")
    VIDEO = (CategoryTier.CORE, "Video")
    DEVELOPMENT = (CategoryTier.CORE, "Development")
    EDUCATION = (CategoryTier.CORE, "Education")
    GAME = (CategoryTier.CORE, "Game")
    GRAPHICS = (CategoryTier.CORE, "Graphics")
    NETWORK = (CategoryTier.CORE, "Network")
    OFFICE = (CategoryTier.CORE, "Office")
    SCIENCE = (CategoryTier.CORE, "Science")
    SETTINGS = (CategoryTier.CORE, "Settings")
    SYSTEM = (CategoryTier.CORE, "System")
    UTILITY = (CategoryTier.CORE, "Utility")
    BUILDING = (CategoryTier.ADDITIONAL, "Building")
    DEBUGGER = (CategoryTier.ADDITIONAL, "Debugger")
    IDE = (CategoryTier.ADDITIONAL, "IDE")
    GUIDESIGNER = (CategoryTier.ADDITIONAL, "GUIDesigner")
    PROFILING = (CategoryTier.ADDITIONAL, "Profiling")
    REVISIONCONTROL = (CategoryTier.ADDITIONAL, "RevisionControl")
    TRANSLATION = (CategoryTier.ADDITIONAL, "Translation")
    CALENDAR = (CategoryTier.ADDITIONAL, "Calendar")
    CONTACTMANAGEMENT = (CategoryTier.ADDITIONAL, "ContactManagement")
    DATABASE = (CategoryTier.ADDITIONAL, "Database")
    DICTIONARY = (CategoryTier.ADDITIONAL, "Dictionary")
    CHART = (CategoryTier.ADDITIONAL, "Chart")
    EMAIL = (CategoryTier.ADDITIONAL, "Email")
    FINANCE = (CategoryTier.ADDITIONAL, "Finance")
    FLOWCHART = (CategoryTier.ADDITIONAL, "FlowChart")
    PDA = (CategoryTier.ADDITIONAL, "PDA")
    PROJECTMANAGEMENT = (CategoryTier.ADDITIONAL, "ProjectManagement")
    PRESENTATION = (CategoryTier.ADDITIONAL, "Presentation")
    SPREADSHEET = (CategoryTier.ADDITIONAL, "Spreadsheet")
    WORDPROCESSOR = (CategoryTier.ADDITIONAL, "WordProcessor")
    TWODGRAPHICS = (CategoryTier.ADDITIONAL, "2DGraphics")
    VECTORGRAPHICS = (CategoryTier.ADDITIONAL, "VectorGraphics")
    RASTERGRAPHICS = (CategoryTier.ADDITIONAL, "RasterGraphics")
    THREEDGRAPHICS = (CategoryTier.ADDITIONAL, "3DGraphics")
    SCANNING = (CategoryTier.ADDITIONAL, "Scanning")
    OCR = (CategoryTier.ADDITIONAL, "OCR")
    PHOTOGRAPHY = (CategoryTier.ADDITIONAL, "Photography")
    PUBLISHING = (CategoryTier.ADDITIONAL, "Publishing")
    VIEWER = (CategoryTier.ADDITIONAL, "Viewer")
    TEXTTOOLS = (CategoryTier.ADDITIONAL, "TextTools")
    DESKTOPSETTINGS = (CategoryTier.ADDITIONAL, "DesktopSettings")
    HARDWARESETTINGS = (CategoryTier.ADDITIONAL, "HardwareSettings")
    PRINTING = (CategoryTier.ADDITIONAL, "Printing")
    PACKAGEMANAGER = (CategoryTier.ADDITIONAL, "PackageManager")
    DIALUP = (CategoryTier.ADDITIONAL, "Dialup")
    INSTANTMESSAGING = (CategoryTier.ADDITIONAL, "InstantMessaging")
    CHAT = (CategoryTier.ADDITIONAL, "Chat")
    IRCCLIENT = (CategoryTier.ADDITIONAL, "IRCClient")
    FEED = (CategoryTier.ADDITIONAL, "Feed")
    FILETRANSFER = (CategoryTier.ADDITIONAL, "FileTransfer")
    HAMRADIO = (CategoryTier.ADDITIONAL, "HamRadio")
    NEWS = (CategoryTier.ADDITIONAL, "News")
    P2P = (CategoryTier.ADDITIONAL, "P2P")
    REMOTEACCESS = (CategoryTier.ADDITIONAL, "RemoteAccess")
    TELEPHONY = (CategoryTier.ADDITIONAL, "Telephony")
    TELEPHONYTOOLS = (CategoryTier.ADDITIONAL, "TelephonyTools")
    VIDEOCONFERENCE = (CategoryTier.ADDITIONAL, "VideoConference")
    WEBBROWSER = (CategoryTier.ADDITIONAL, "WebBrowser")
    WEBDEVELOPMENT = (CategoryTier.ADDITIONAL, "WebDevelopment")
    MIDI = (CategoryTier.ADDITIONAL, "Midi")
    MIXER = (CategoryTier.ADDITIONAL, "Mixer")
    SEQUENCER = (CategoryTier.ADDITIONAL, "Sequencer")
    TUNER = (CategoryTier.ADDITIONAL, "Tuner")
    TV = (CategoryTier.ADDITIONAL, "TV")
    AUDIOVIDEOEDITING = (CategoryTier.ADDITIONAL, "AudioVideoEditing")
    PLAYER = (CategoryTier.ADDITIONAL, "Player")
    RECORDER = (CategoryTier.ADDITIONAL, "Recorder")
    DISCBURNING = (CategoryTier.ADDITIONAL, "DiscBurning")
    ACTIONGAME = (CategoryTier.ADDITIONAL, "ActionGame")
    ADVENTUREGAME = (CategoryTier.ADDITIONAL, "AdventureGame")
    ARCADEGAME = (CategoryTier.ADDITIONAL, "ArcadeGame")
    BOARDGAME = (CategoryTier.ADDITIONAL, "BoardGame")
    BLOCKSGAME = (CategoryTier.ADDITIONAL, "BlocksGame")
    CARDGAME = (CategoryTier.ADDITIONAL, "CardGame")
    KIDSGAME = (CategoryTier.ADDITIONAL, "KidsGame")
    LOGICGAME = (CategoryTier.ADDITIONAL, "LogicGame")
    ROLEPLAYING = (CategoryTier.ADDITIONAL, "RolePlaying")
    SHOOTER = (CategoryTier.ADDITIONAL, "Shooter")
    SIMULATION = (CategoryTier.ADDITIONAL, "Simulation")
    SPORTSGAME = (CategoryTier.ADDITIONAL, "SportsGame")
    STRATEGYGAME = (CategoryTier.ADDITIONAL, "StrategyGame")
    ART = (CategoryTier.ADDITIONAL, "Art")
    CONSTRUCTION = (CategoryTier.ADDITIONAL, "Construction")
    MUSIC = (CategoryTier.ADDITIONAL, "Music")
    LANGUAGES = (CategoryTier.ADDITIONAL, "Languages")
    ARTIFICIALINTELLIGENCE = (CategoryTier.ADDITIONAL, "ArtificialIntelligence")
    ASTRONOMY = (CategoryTier.ADDITIONAL, "Astronomy")
    BIOLOGY = (CategoryTier.ADDITIONAL, "Biology")
    CHEMISTRY = (CategoryTier.ADDITIONAL, "Chemistry")
    COMPUTERSCIENCE = (CategoryTier.ADDITIONAL, "ComputerScience")
    DATAVISUALIZATION = (CategoryTier.ADDITIONAL, "DataVisualization")
    ECONOMY = (CategoryTier.ADDITIONAL, "Economy")
    ELECTRICITY = (CategoryTier.ADDITIONAL, "Electricity")
    GEOGRAPHY = (CategoryTier.ADDITIONAL, "Geography")
    GEOLOGY = (CategoryTier.ADDITIONAL, "Geology")
    GEOSCIENCE = (CategoryTier.ADDITIONAL, "Geoscience")
    HISTORY = (CategoryTier.ADDITIONAL, "History")
    HUMANITIES = (CategoryTier.ADDITIONAL, "Humanities")
    IMAGEPROCESSING = (CategoryTier.ADDITIONAL, "ImageProcessing")
    LITERATURE = (CategoryTier.ADDITIONAL, "Literature")
    MAPS = (CategoryTier.ADDITIONAL, "Maps")
    MATH = (CategoryTier.ADDITIONAL, "Math")
    NUMERICALANALYSIS = (CategoryTier.ADDITIONAL, "NumericalAnalysis")
    MEDICALSOFTWARE = (CategoryTier.ADDITIONAL, "MedicalSoftware")
    PHYSICS = (CategoryTier.ADDITIONAL, "Physics")
    ROBOTICS = (CategoryTier.ADDITIONAL, "Robotics")
    SPIRITUALITY = (CategoryTier.ADDITIONAL, "Spirituality")
    SPORTS = (CategoryTier.ADDITIONAL, "Sports")
    PARALLELCOMPUTING = (CategoryTier.ADDITIONAL, "ParallelComputing")
    AMUSEMENT = (CategoryTier.ADDITIONAL, "Amusement")
    ARCHIVING = (CategoryTier.ADDITIONAL, "Archiving")
    COMPRESSION = (CategoryTier.ADDITIONAL, "Compression")
    ELECTRONICS = (CategoryTier.ADDITIONAL, "Electronics")
    EMULATOR = (CategoryTier.ADDITIONAL, "Emulator")
    ENGINEERING = (CategoryTier.ADDITIONAL, "Engineering")
    FILETOOLS = (CategoryTier.ADDITIONAL, "FileTools")
    FILEMANAGER = (CategoryTier.ADDITIONAL, "FileManager")
    TERMINALEMULATOR = (CategoryTier.ADDITIONAL, "TerminalEmulator")
    FILESYSTEM = (CategoryTier.ADDITIONAL, "Filesystem")
    MONITOR = (CategoryTier.ADDITIONAL, "Monitor")
    SECURITY = (CategoryTier.ADDITIONAL, "Security")
    ACCESSIBILITY = (CategoryTier.ADDITIONAL, "Accessibility")
    CALCULATOR = (CategoryTier.ADDITIONAL, "Calculator")
    CLOCK = (CategoryTier.ADDITIONAL, "Clock")
    TEXTEDITOR = (CategoryTier.ADDITIONAL, "TextEditor")
    DOCUMENTATION = (CategoryTier.ADDITIONAL, "Documentation")
    ADULT = (CategoryTier.ADDITIONAL, "Adult")
    CORE = (CategoryTier.ADDITIONAL, "Core")
    KDE = (CategoryTier.ADDITIONAL, "KDE")
    GNOME = (CategoryTier.ADDITIONAL, "GNOME")
    XFCE = (CategoryTier.ADDITIONAL, "XFCE")
    GTK = (CategoryTier.ADDITIONAL, "GTK")
    QT = (CategoryTier.ADDITIONAL, "Qt")
    MOTIF = (CategoryTier.ADDITIONAL, "Motif")
    JAVA = (CategoryTier.ADDITIONAL, "Java")
    CONSOLEONLY = (CategoryTier.ADDITIONAL, "ConsoleOnly")
    SCREENSAVER = (CategoryTier.RESERVED, "Screensaver")
    TRAYICON = (CategoryTier.RESERVED, "TrayIcon")
    APPLET = (CategoryTier.RESERVED, "Applet")
    SHELL = (CategoryTier.RESERVED, "Shell")

    @property
    def tier(self) -> CategoryTier:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


class DesktopEnvironment(Enum):
    """Registered ``OnlyShowIn``/``NotShowIn`` environment tokens."""

    GNOME = "GNOME"
    GNOME_CLASSIC = "GNOME-Classic"
    GNOME_FLASHBACK = "GNOME-Flashback"
    KDE = "KDE"
    LXDE = "LXDE"
    LXQT = "LXQt"
    MATE = "MATE"
    RAZOR = "Razor"
    ROX = "ROX"
    TDE = "TDE"
    UNITY = "Unity"
    XFCE = "XFCE"
    EDE = "EDE"
    CINNAMON = "Cinnamon"
    PANTHEON = "Pantheon"
    BUDGIE = "Budgie"
    ENLIGHTENMENT = "Enlightenment"
    DDE = "DDE"
    ENDLESS = "Endless"
    OLD = "Old"

    @property
    def label(self) -> str:
        return self.value


def validate_file_name(value: object) -> str:
    if not isinstance(value, str) or not FILE_NAME_PATTERN.fullmatch(value):
        raise LauncherValidationError(
            f"Launcher file name {value!r} must start with a lowercase letter followed by lowercase letters or digits",
        )
    return value


def require_text(field_name: str, value: object) -> str:
    if not isinstance(value, str) or not value:
        raise LauncherValidationError(f"{field_name} must be a non-empty string")
    return value


def normalise_lang_tag(tag: object) -> str:
    if not isinstance(tag, str):
        raise LauncherValidationError(f"Invalid language tag {tag!r}")
    normalised = tag.strip().lower()
    low, high = LANG_TAG_LENGTH
    if not low <= len(normalised) <= high:
        raise LauncherValidationError(f"Invalid language tag {normalised!r}; expected 2-3 letters")
    return normalised


def validate_mime_type(value: object) -> str:
    if not isinstance(value, str) or not MIME_PATTERN.fullmatch(value):
        raise LauncherValidationError(f"Invalid MIME type {value!r}")
    return value


def require_string(field_name: str, value: object) -> str:
    if not isinstance(value, str):
        raise LauncherValidationError(f"{field_name} must be a string, got {type(value).__name__}")
    return value


_OPTIONAL_TEXT = ("try_exec", "icon", "comment", "generic_name", "path", "startup_wm_class")

M = TypeVar("M", bound=Enum)


def _members(enum_cls: Type[M], items: Iterable[object]) -> FrozenSet[M]:
    members = frozenset(items)
    for item in members:
        if not isinstance(item, enum_cls):
            raise LauncherValidationError(f"Unknown {enum_cls.__name__} {item!r}")
    return members  # type: ignore[return-value]


def _localized_mapping(data: Mapping[str, str]) -> Mapping[str, str]:
    normalised: Dict[str, str] = {}
    for tag, value in data.items():
        normalised[normalise_lang_tag(tag)] = require_string(f"localized value for {tag!r}", value)
    return MappingProxyType(normalised)


@dataclass(frozen=True)
class LauncherDescriptor:
    """Immutable launcher description produced by :class:`LauncherBuilder`."""

    file_name: str
    kind: LauncherType
    name: str
    exec: str
    try_exec: str | None = None
    icon: str | None = None
    comment: str | None = None
    generic_name: str | None = None
    path: str | None = None
    startup_wm_class: str | None = None
    terminal: bool = False
    no_display: bool = False
    startup_notify: bool = False
    categories: FrozenSet[Category] = frozenset()
    keywords: FrozenSet[str] = frozenset()
    mime_types: FrozenSet[str] = frozenset()
    only_show_in: FrozenSet[DesktopEnvironment] = frozenset()
    not_show_in: FrozenSet[DesktopEnvironment] = frozenset()
    name_lang: Mapping[str, str] = field(default_factory=dict)
    generic_name_lang: Mapping[str, str] = field(default_factory=dict)
    comment_lang: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_file_name(self.file_name)
        if not isinstance(self.kind, LauncherType):
            raise LauncherValidationError(f"Unknown launcher type {self.kind!r}")
        require_text("name", self.name)
        require_text("exec", self.exec)
        for attr in _OPTIONAL_TEXT:
            value = getattr(self, attr)
            if value is not None:
                require_text(attr, value)
        object.__setattr__(self, "categories", _members(Category, self.categories))
        object.__setattr__(self, "only_show_in", _members(DesktopEnvironment, self.only_show_in))
        object.__setattr__(self, "not_show_in", _members(DesktopEnvironment, self.not_show_in))
        object.__setattr__(self, "keywords", frozenset(require_text("keyword", item) for item in self.keywords))
        object.__setattr__(self, "mime_types", frozenset(validate_mime_type(item) for item in self.mime_types))
        for attr in ("name_lang", "generic_name_lang", "comment_lang"):
            object.__setattr__(self, attr, _localized_mapping(getattr(self, attr)))

    def __hash__(self) -> int:
        values = (getattr(self, item.name) for item in fields(self))
        return hash(tuple(tuple(sorted(value.items())) if isinstance(value, Mapping) else value for value in values))

    def filename(self) -> str:
        return f"{self.file_name}.desktop"

    def render(self) -> str:
        from .serializer import render_descriptor

        return render_descriptor(self)

    def install(self, overwrite: bool = False) -> "InstallResult":
        """Install into the per-user launcher directory with default settings."""

        from desktoplauncher.app.install.service import LauncherInstaller

        return LauncherInstaller.default().install(self, overwrite=overwrite)


__all__ = [
    "Category",
    "CategoryTier",
    "DesktopEnvironment",
    "FILE_NAME_PATTERN",
    "LauncherDescriptor",
    "LauncherType",
    "LauncherValidationError",
    "MIME_PATTERN",
    "normalise_lang_tag",
    "require_string",
    "require_text",
    "validate_file_name",
    "validate_mime_type",
]
