

get_jazzmin_settings = {

    "order_with_respect_to": [
        "auctions",
        "bids",
        "accounts",
    ],
    "site_title": "Auction Site Admin",
    "site_header": "Auction Site Admin",
    "site_brand": "Auction Site",
    "welcome_sign": "Welcome to the Auction Admin",
    "copyright": "Auction Site",

    "show_sidebar": True,
    "navigation_expanded": True,

    # Icons (use fontawesome class names)
    "icons": {
        "auth": "fa fa-users-cog",
        "auth.user": "fa fa-user",
        "auth.group": "fa fa-users",

        "accounts.Profile": "fas fa-credit-card",

        "auctions.Product": "fas fa-box-open",
        "auctions.Auction": "fas fa-gavel",

        "bids.Bid": "fas fa-hand-holding-usd",
    },

    "custom_links": {
        "bids": [{
            "name": "My Bids",
            "url": "bids:index",
            "icon": "fas fa-list",
        }],
    },
    # Language options
    "language_chooser": False,
    "use_google_fonts_cdn": True,

}

get_jazzmin_ui_tweaks = {
    "theme": "flatly",
    "dark_mode_theme": "darkly",

    "navbar": "navbar-dark navbar-primary",
    "sidebar": "sidebar-dark-primary",

    "navbar_small_text": True,
    "footer_small_text": True,
    "body_small_text": False,
    "brand_small_text": False,
    "sidebar_nav_small_text": False,

    "sidebar_disable_expand": False,
    "sidebar_nav_child_indent": True,
    "sidebar_nav_compact_style": True,
    "sidebar_nav_flat_style": True,

    "related_modal_active": True,
}
