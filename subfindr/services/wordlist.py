"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

# Well-known subdomain labels, probed in this order in dictionary mode
DICTIONARY_WORDS = (
    "www", "mail", "ftp", "localhost", "webmail", "smtp", "pop", "ns1",
    "webdisk", "ns2", "cpanel", "whm", "autodiscover", "autoconfig", "m",
    "imap", "test", "ns", "blog", "pop3", "dev", "www2", "admin", "forum",
    "news", "vpn", "ns3", "mail2", "new", "mysql", "old", "lists", "support",
    "mobile", "mx", "static", "docs", "beta", "shop", "sql", "secure", "demo",
    "cp", "calendar", "wiki", "web", "media", "email", "images", "img", "www1",
    "intranet", "portal", "video", "sip", "dns2", "api", "cdn", "stats",
    "dns1", "ns4", "www3", "dns", "search", "staging", "server", "mx1", "chat",
    "wap", "my", "svn", "mail1", "sites", "proxy", "ads", "host", "crm", "cms",
    "backup", "mx2", "lyncdiscover", "info", "apps", "download", "remote",
    "db", "forums", "store", "relay", "files", "newsletter", "app", "live",
    "owa", "en", "start", "sms", "office", "exchange", "ipv4", "mail3", "help",
    "blogs", "helpdesk", "web1", "home", "library", "ftp2", "ntp", "monitor",
    "login", "service", "correo", "www4", "moodle", "it", "gateway", "gw", "i",
    "stat", "stage", "ldap", "tv", "ssl", "web2", "ns5", "upload", "nagios",
    "smtp2", "online", "ad", "survey", "data", "radio", "extranet", "test2",
    "mssql", "dns3", "jobs", "services", "panel", "irc", "hosting", "cloud",
    "de", "gmail", "s", "bbs", "cs", "ww", "mrtg", "git", "image", "members",
    "pda", "vps", "www5", "finance", "upload1", "mail4", "prod", "sandbox",
    "api2", "monitoring", "status",
)

_DICTIONARY_SET = frozenset(DICTIONARY_WORDS)


def is_dictionary_word(label: str) -> bool:
    return label in _DICTIONARY_SET
