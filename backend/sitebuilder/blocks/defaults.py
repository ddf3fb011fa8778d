"""
Default content for each block type when a new section is created.

These are starting values the editor lets users customize. Never hand these
dicts out directly: registry.default_content() returns a deep copy.
"""
from typing import Any, Dict

# Neutral styling shared by most content blocks (styling disabled, theme-inherited)
_SECTION_STYLING: Dict[str, Any] = {
    "enableStyling": False,
    "textColorMode": "auto",
    "showBorder": False,
    "borderWidth": "medium",
    "borderRadius": "medium",
    "borderColor": "",
    "boxBackgroundColor": "",
    "boxBackgroundOpacity": 100,
    "useThemeBackground": True,
    "backgroundImage": "",
    "overlayColor": "#000000",
    "overlayOpacity": 0,
}

_ROTATING_TITLE: Dict[str, Any] = {
    "beforeText": "We specialize in",
    "words": ["Design", "Development", "Marketing"],
    "afterText": "",
    "effect": "clip",
    "displayTime": 2000,
    "animationMode": "loop",
}

_HERO_IMAGE: Dict[str, Any] = {
    "image": "",
    "imageAlt": "",
    "imagePosition": "top",
    "imageMobileStack": "above",
    "imageRounding": "none",
    "imageBorderWidth": "none",
    "imageBorderColor": "",
    "imageShadow": "none",
    "imageSize": 200,
}

_DEFAULT_FEATURES = [
    {
        "icon": "star",
        "title": "Feature One",
        "description": "Describe your first key feature or benefit here.",
    },
    {
        "icon": "zap",
        "title": "Feature Two",
        "description": "Highlight another important aspect of your offering.",
    },
    {
        "icon": "shield",
        "title": "Feature Three",
        "description": "Share what makes you different from the competition.",
    },
]

SECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "header": {
        "siteName": "Your Site",
        "logoUrl": "",
        "links": [
            {"label": "Home", "url": "/"},
            {"label": "About", "url": "/about"},
            {"label": "Contact", "url": "/contact"},
        ],
        "showCta": True,
        "ctaText": "Get Started",
        "ctaUrl": "#",
        "layout": "left",
        "sticky": True,
        "showLogoText": True,
        "logoSize": 32,
        "enableStyling": False,
        "textColorMode": "auto",
        "backgroundImage": "",
        "overlayColor": "#000000",
        "overlayOpacity": 50,
        "showBorder": True,
        "borderWidth": "thin",
        "borderColor": "",
        "textSize": "normal",
        "showSocialLinks": True,
        "socialLinksPosition": "right",
        "socialLinksSize": "medium",
    },
    "heading": {
        "title": "Page Title",
        "subtitle": "",
        "level": 1,
        "alignment": "center",
        "textColorMode": "auto",
    },
    "hero": {
        "heading": "Welcome to Your Site",
        "subheading": "Create something amazing",
        "buttons": [
            {"id": "btn-1", "text": "Get Started", "url": "#", "variant": "primary"},
        ],
        "titleMode": "static",
        "rotatingTitle": _ROTATING_TITLE,
        **_HERO_IMAGE,
        "bodyText": "",
        "bodyTextAlignment": "center",
    },
    "hero_primitive": {
        "layout": "full",
        "heading": "Welcome to Your Site",
        "subheading": "Create something amazing with our platform",
        "textAlignment": "center",
        "buttons": [
            {"id": "btn-1", "text": "Get Started", "url": "#", "variant": "primary"},
        ],
        "headingLevel": 1,
        "titleMode": "static",
        "rotatingTitle": _ROTATING_TITLE,
        "bodyText": "",
        "bodyTextAlignment": "center",
        "heroBackgroundImage": "",
        **_HERO_IMAGE,
        **_SECTION_STYLING,
        "contentWidth": "medium",
        "textSize": "normal",
    },
    "richtext": {
        "mode": "visual",
        "body": "<p>Start writing your content here.</p>",
        "markdown": "",
        "imageRounding": "medium",
        **_SECTION_STYLING,
        "contentWidth": "narrow",
        "textSize": "normal",
    },
    "text": {
        "body": "<p>Start writing your content here. You can add paragraphs, format text, and share your message with the world.</p>",
        **_SECTION_STYLING,
        "contentWidth": "narrow",
        "textSize": "normal",
    },
    "markdown": {
        "markdown": "# Hello World\n\nStart writing your markdown content here.\n",
        **_SECTION_STYLING,
        "contentWidth": "narrow",
        "textSize": "normal",
    },
    "image": {
        "src": "",
        "alt": "Image description",
        "caption": "",
        "imageWidth": 50,
        "textWidth": 50,
        "layout": "image-only",
        "description": "",
        "enableStyling": False,
        "textColorMode": "auto",
        "showBorder": False,
        "borderWidth": "medium",
        "borderRadius": "medium",
        "borderColor": "",
        "backgroundImage": "",
        "overlayColor": "#000000",
        "overlayOpacity": 0,
    },
    "gallery": {
        "images": [],
        "aspectRatio": "1:1",
        "layout": "grid",
        "columns": "auto",
        "gap": "medium",
        "lightbox": False,
        "autoRotate": False,
        "autoRotateInterval": 5,
        "showBorder": True,
        "borderWidth": "thin",
        "borderRadius": "medium",
        "borderColor": "",
    },
    "features": {
        "sectionTitle": "",
        "sectionSubtitle": "",
        "features": _DEFAULT_FEATURES,
        **_SECTION_STYLING,
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "textSize": "normal",
    },
    "cta": {
        "heading": "Ready to get started?",
        "description": "Join thousands of satisfied customers and take the next step today.",
        "buttonText": "Sign Up Now",
        "buttonUrl": "#",
        **_SECTION_STYLING,
        "textSize": "normal",
    },
    "testimonials": {
        "testimonials": [
            {
                "quote": "This product has completely transformed how we work. Highly recommended!",
                "author": "Jane Smith",
                "role": "CEO, Example Corp",
                "avatar": "",
            },
        ],
        **_SECTION_STYLING,
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "textSize": "normal",
    },
    "contact": {
        "heading": "Get in Touch",
        "description": "Have questions? Send us a message and we'll respond as soon as possible.",
        "variant": "simple",
        **_SECTION_STYLING,
        "showFormBackground": True,
        "formBackgroundColor": "",
        "textSize": "normal",
    },
    "footer": {
        "copyright": "© Your Company. All rights reserved.",
        "links": [
            {"label": "Privacy Policy", "url": "/privacy"},
            {"label": "Terms of Service", "url": "/terms"},
        ],
        "layout": "simple",
        "enableStyling": False,
        "textColorMode": "auto",
        "backgroundImage": "",
        "overlayColor": "#000000",
        "overlayOpacity": 50,
        "showBorder": False,
        "borderWidth": "thin",
        "borderColor": "",
        "textSize": "normal",
        "showSocialLinks": True,
        "socialLinksPosition": "above",
        "socialLinksAlignment": "center",
        "socialLinksSize": "medium",
    },
    "blog_featured": {
        "postId": None,
        "layout": "split",
        "showFullContent": False,
        "contentLimit": 0,
        "showReadMore": True,
        "showCategory": True,
        "showAuthor": True,
        "overlayColor": "#000000",
        "overlayOpacity": 50,
    },
    "blog_grid": {
        "sectionTitle": "",
        "sectionSubtitle": "",
        "postCount": 6,
        "showExcerpt": True,
        "showAuthor": True,
        "pageFilter": "current",
        "imageBackgroundMode": "muted",
        "imageBackgroundColor": "",
        "cardBorderMode": "default",
        "cardBorderColor": "",
        **_SECTION_STYLING,
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "textSize": "normal",
    },
    "blog": {
        "mode": "featured",
        "sectionTitle": "",
        "sectionSubtitle": "",
        "postId": None,
        "featuredLayout": "split",
        "showFullContent": False,
        "contentLimit": 0,
        "showReadMore": True,
        "gridLayout": "grid",
        "postCount": 6,
        "columns": 3,
        "showExcerpt": True,
        "pageFilter": "current",
        "showCategory": True,
        "showAuthor": True,
        "showDate": True,
        "imageFit": "cover",
        "cardBorderMode": "default",
        "cardBorderColor": "",
        "imageBackgroundMode": "muted",
        "imageBackgroundColor": "",
        **_SECTION_STYLING,
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "textSize": "normal",
        "contentWidth": "medium",
    },
    "embed": {
        "embedCode": "",
        "src": "",
        "aspectRatio": "16:9",
        "customHeight": 400,
        "title": "",
        "sourceType": "embed",
    },
    "social_links": {
        "title": "",
        "subtitle": "",
        "alignment": "center",
        "size": "medium",
        "iconStyle": "brand",
        **_SECTION_STYLING,
    },
    "product_grid": {
        "sectionTitle": "",
        "sectionSubtitle": "",
        "items": [],
        "showItemTitles": True,
        "showItemDescriptions": True,
        "columns": 3,
        "gap": "medium",
        "iconStyle": "brand",
        "enableStyling": False,
        "showBorder": False,
        "borderWidth": "medium",
        "borderRadius": "medium",
        "borderColor": "",
        "backgroundImage": "",
        "overlayColor": "#000000",
        "overlayOpacity": 0,
        "textColorMode": "auto",
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "cardBackgroundOpacity": 100,
    },
    "article": {
        "body": "<p>Start writing your article here.</p>",
        "imageRounding": "medium",
        **_SECTION_STYLING,
        "contentWidth": "medium",
        "textSize": "normal",
    },
    "cards": {
        "template": "feature",
        "sectionTitle": "",
        "sectionSubtitle": "",
        "items": [
            {"id": f"card-{index}", **feature}
            for index, feature in enumerate(_DEFAULT_FEATURES, start=1)
        ],
        "columns": 3,
        "gap": "medium",
        **_SECTION_STYLING,
        "showCardBackground": True,
        "cardBackgroundColor": "",
        "textSize": "normal",
        "iconStyle": "brand",
        "showItemTitles": True,
        "showItemDescriptions": True,
    },
    "media": {
        "mode": "single",
        # single
        "src": "",
        "alt": "Image description",
        "caption": "",
        "imageWidth": 50,
        "textWidth": 50,
        "layout": "image-only",
        "description": "",
        # gallery
        "images": [],
        "galleryAspectRatio": "1:1",
        "galleryLayout": "grid",
        "columns": "auto",
        "gap": "medium",
        "lightbox": False,
        "autoRotate": False,
        "autoRotateInterval": 5,
        # embed
        "embedCode": "",
        "embedSrc": "",
        "embedAspectRatio": "16:9",
        "customHeight": 400,
        "embedTitle": "",
        "embedSourceType": "embed",
        **_SECTION_STYLING,
        "textSize": "normal",
    },
    "accordion": {
        "mode": "faq",
        "sectionTitle": "",
        "sectionSubtitle": "",
        "iconStyle": "chevron",
        "allowMultipleOpen": False,
        "showExpandAll": True,
        "defaultExpandFirst": True,
        "faqItems": [
            {
                "id": "faq-1",
                "title": "What is your return policy?",
                "content": "<p>We offer a 30-day money-back guarantee on all purchases.</p>",
            },
            {
                "id": "faq-2",
                "title": "How long does shipping take?",
                "content": "<p>Standard shipping takes 5-7 business days.</p>",
            },
        ],
        "showNumbering": False,
        "modules": [],
        "showLessonCount": True,
        "showTotalDuration": True,
        "customItems": [],
        **_SECTION_STYLING,
        "textSize": "normal",
    },
}
