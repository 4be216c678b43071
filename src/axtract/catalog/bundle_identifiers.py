"""Known application bundle identifiers.

Static lookup tables only. Names are snake_case keys; values are the
identifiers hosts report for running applications.
"""

from enum import Enum
from types import MappingProxyType

APPLE = MappingProxyType(
    {
        "calendar": "com.apple.iCal",
        "mail": "com.apple.mail",
        "safari": "com.apple.Safari",
        "finder": "com.apple.finder",
        "notes": "com.apple.Notes",
        "reminders": "com.apple.reminders",
        "messages": "com.apple.MobileSMS",
        "facetime": "com.apple.FaceTime",
        "music": "com.apple.Music",
        "photos": "com.apple.Photos",
        "preview": "com.apple.Preview",
        "terminal": "com.apple.Terminal",
        "system_preferences": "com.apple.systempreferences",
        "activity_monitor": "com.apple.ActivityMonitor",
        "keychain": "com.apple.keychainaccess",
        "xcode": "com.apple.dt.Xcode",
        "simulator": "com.apple.iphonesimulator",
        "instruments": "com.apple.dt.Instruments",
    }
)

IDES = MappingProxyType(
    {
        "vs_code": "com.microsoft.VSCode",
        "vs_code_insiders": "com.microsoft.VSCodeInsiders",
        "unity": "com.unity3d.UnityEditor",
        "godot": "org.godotengine.godot",
        "android_studio": "com.google.android.studio",
        "intellij": "com.jetbrains.intellij",
        "webstorm": "com.jetbrains.WebStorm",
        "pycharm": "com.jetbrains.pycharm",
        "fleet": "com.jetbrains.fleet",
        "sublime_text": "com.sublimetext.4",
        "atom": "com.github.atom",
        "textmate": "com.macromates.TextMate",
        "bbedit": "com.barebones.bbedit",
        "nova": "com.panic.Nova",
    }
)

BROWSERS = MappingProxyType(
    {
        "chrome": "com.google.Chrome",
        "firefox": "org.mozilla.firefox",
        "edge": "com.microsoft.edgemac",
        "brave": "com.brave.Browser",
        "arc": "company.thebrowser.Browser",
        "opera": "com.operasoftware.Opera",
    }
)

COMMUNICATION = MappingProxyType(
    {
        "slack": "com.tinyspeck.slackmacgap",
        "zoom": "us.zoom.xos",
        "teams": "com.microsoft.teams",
        "teams2": "com.microsoft.teams2",
        "outlook": "com.microsoft.Outlook",
        "discord": "com.hnc.Discord",
        "telegram": "ru.keepcoder.Telegram",
        "whatsapp": "net.whatsapp.WhatsApp",
        "skype": "com.skype.skype",
    }
)

PRODUCTIVITY = MappingProxyType(
    {
        "notion": "notion.id",
        "obsidian": "md.obsidian",
        "bear": "net.shinyfrog.bear",
        "things": "com.culturedcode.ThingsMac",
        "todoist": "com.todoist.mac.Todoist",
        "omnifocus": "com.omnigroup.OmniFocus3",
        "fantastical": "com.flexibits.fantastical2.mac",
        "cardhop": "com.flexibits.cardhop.mac",
        "drafts": "com.agiletortoise.Drafts-OSX",
        "ulysses": "com.ulyssesapp.mac",
    }
)

CREATIVE = MappingProxyType(
    {
        "figma": "com.figma.Desktop",
        "sketch": "com.bohemiancoding.sketch3",
        "photoshop": "com.adobe.Photoshop",
        "illustrator": "com.adobe.Illustrator",
        "after_effects": "com.adobe.AfterEffects",
        "premiere_pro": "com.adobe.PremierePro",
        "final_cut_pro": "com.apple.FinalCut",
        "logic_pro": "com.apple.logic10",
        "garageband": "com.apple.garageband10",
        "blender": "org.blenderfoundation.blender",
    }
)

UTILITIES = MappingProxyType(
    {
        "iterm": "com.googlecode.iterm2",
        "warp": "dev.warp.Warp-Stable",
        "alacritty": "org.alacritty",
        "kitty": "net.kovidgoyal.kitty",
        "hyper": "co.zeit.hyper",
        "transmit": "com.panic.Transmit",
        "cyberduck": "ch.sudo.cyberduck",
        "tower": "com.fournova.Tower3",
        "sourcetree": "com.torusknot.SourceTreeNotMAS",
        "fork": "com.DanPristupov.Fork",
        "postman": "com.postmanlabs.mac",
        "insomnia": "com.insomnia.app",
        "tableplus": "com.tinyapp.TablePlus",
        "dbeaver": "org.jkiss.dbeaver.core.product",
        "docker": "com.docker.docker",
    }
)

BUNDLE_IDENTIFIERS = MappingProxyType(
    {
        **APPLE,
        **IDES,
        **BROWSERS,
        **COMMUNICATION,
        **PRODUCTIVITY,
        **CREATIVE,
        **UTILITIES,
    }
)


def bundle_id_for(name: str) -> str | None:
    """Look up a bundle identifier by application name.

    Accepts snake_case keys and loose spellings such as ``"VS Code"``.
    """
    key = name.strip().lower().replace(" ", "_").replace("-", "_")
    return BUNDLE_IDENTIFIERS.get(key)


class Browser(Enum):
    """Browsers whose tab bars and address bars can be read."""

    SAFARI = "com.apple.Safari"
    CHROME = "com.google.Chrome"
    FIREFOX = "org.mozilla.firefox"
    EDGE = "com.microsoft.edgemac"
    ARC = "company.thebrowser.Browser"
    BRAVE = "com.brave.Browser"

    @property
    def bundle_id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _BROWSER_NAMES[self]

    @classmethod
    def from_bundle_id(cls, bundle_id: str | None) -> "Browser | None":
        for browser in cls:
            if browser.value == bundle_id:
                return browser
        return None


class Terminal(Enum):
    """Terminal emulators."""

    TERMINAL = "com.apple.Terminal"
    ITERM = "com.googlecode.iterm2"
    WARP = "dev.warp.Warp-Stable"
    ALACRITTY = "org.alacritty"
    KITTY = "net.kovidgoyal.kitty"
    HYPER = "co.zeit.hyper"

    @property
    def bundle_id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _TERMINAL_NAMES[self]

    @classmethod
    def from_bundle_id(cls, bundle_id: str | None) -> "Terminal | None":
        for terminal in cls:
            if terminal.value == bundle_id:
                return terminal
        return None


class IDE(Enum):
    """IDEs with known diagnostic and title layouts."""

    XCODE = "com.apple.dt.Xcode"
    UNITY = "com.unity3d.UnityEditor"
    GODOT = "org.godotengine.godot"
    VS_CODE = "com.microsoft.VSCode"
    ANDROID_STUDIO = "com.google.android.studio"
    INTELLIJ = "com.jetbrains.intellij"
    FLEET = "com.jetbrains.fleet"

    @property
    def bundle_id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _IDE_NAMES[self]


_BROWSER_NAMES = {
    Browser.SAFARI: "Safari",
    Browser.CHROME: "Chrome",
    Browser.FIREFOX: "Firefox",
    Browser.EDGE: "Edge",
    Browser.ARC: "Arc",
    Browser.BRAVE: "Brave",
}

_TERMINAL_NAMES = {
    Terminal.TERMINAL: "Terminal",
    Terminal.ITERM: "iTerm2",
    Terminal.WARP: "Warp",
    Terminal.ALACRITTY: "Alacritty",
    Terminal.KITTY: "Kitty",
    Terminal.HYPER: "Hyper",
}

_IDE_NAMES = {
    IDE.XCODE: "Xcode",
    IDE.UNITY: "Unity",
    IDE.GODOT: "Godot",
    IDE.VS_CODE: "VS Code",
    IDE.ANDROID_STUDIO: "Android Studio",
    IDE.INTELLIJ: "IntelliJ IDEA",
    IDE.FLEET: "JetBrains Fleet",
}
