"""Initial records loaded into the application store on startup."""
from icons import Icon

INITIAL_USERS = [
    {"id": "1", "username": "admin", "role": "admin", "name": "System Administrator"},
    {"id": "2", "username": "donor", "role": "donor", "name": "Partner Organization"},
]

INITIAL_PRODUCTS = [
    {"id": "1", "code": "6291001", "name_ar": "حليب ممتاز (1 لتر)", "name_en": "Premium Milk (1L)",
     "price": 850, "unit": "Bottle", "last_updated": "2023-10-25", "category": "Dairy"},
    {"id": "2", "code": "6291002", "name_ar": "أرز بسمتي (5 كجم)", "name_en": "Basmati Rice (5kg)",
     "price": 6500, "unit": "Bag", "last_updated": "2023-10-24", "category": "Grains"},
    {"id": "3", "code": "6291003", "name_ar": "دقيق أبيض (10 كجم)", "name_en": "White Flour (10kg)",
     "price": 4200, "unit": "Bag", "last_updated": "2023-10-26", "category": "Grains"},
    {"id": "4", "code": "6291004", "name_ar": "زيت طهي (1.5 لتر)", "name_en": "Cooking Oil (1.5L)",
     "price": 2100, "unit": "Bottle", "last_updated": "2023-10-20", "category": "Oils"},
    {"id": "5", "code": "6291005", "name_ar": "سكر أبيض (2 كجم)", "name_en": "White Sugar (2kg)",
     "price": 1800, "unit": "Packet", "last_updated": "2023-10-22", "category": "Sugar"},
    {"id": "6", "code": "6291006", "name_ar": "أسطوانة غاز منزلي", "name_en": "Cooking Gas Cylinder",
     "price": 7500, "unit": "Cylinder", "last_updated": "2023-10-27", "category": "Energy"},
]

SLIDES = [
    {"image": "https://images.unsplash.com/photo-1577563908411-5077b6dc7624?auto=format&fit=crop&w=1920&q=80",
     "title_key": "heroTitle1", "sub_key": "heroSub1"},
    {"image": "https://images.unsplash.com/photo-1616486338812-3dadae4b4f9d?auto=format&fit=crop&w=1920&q=80",
     "title_key": "heroTitle2", "sub_key": "heroSub2"},
    {"image": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73?auto=format&fit=crop&w=1920&q=80",
     "title_key": "heroTitle3", "sub_key": "heroSub3"},
]

NEWS_DATA = [
    {
        "id": "1",
        "image": "https://images.unsplash.com/photo-1577962917302-cd874c4e31d2?auto=format&fit=crop&w=800&q=80",
        "date": "11 Nov 2025",
        "title_key": "news_school_title",
        "title_ar": "ترحيب بقرار تخفيض الرسوم الدراسية",
        "title_en": "Welcoming School Fees Reduction",
        "desc_key": "news_school_desc",
        "desc_ar": "رحبت جمعية حماية المستهلك بمحافظة تعز بقرار المحافظ رقم (137) لسنة 2025م، "
                   "القاضي بتحديد وتخفيض الرسوم الدراسية في مدارس التعليم الأهلي والخاص "
                   "بالمحافظة للعام الدراسي 2025–2026م.",
        "desc_en": "CPA welcomes Governor Decree (137) to reduce private school fees, "
                   "a major step for parents' rights.",
    },
    {
        "id": "2",
        "image": "https://images.unsplash.com/photo-1578916171728-46686eac8d58?auto=format&fit=crop&w=800&q=80",
        "date": "02 Aug 2025",
        "title_key": "news_campaign_title",
        "title_ar": "حملة ميدانية لضبط الأسعار",
        "title_en": "Field Campaign for Price Control",
        "desc_key": "news_campaign_desc",
        "desc_ar": "خرجت صباح اليوم سبع لجان ميدانية تابعة لمكتب الصناعة والتجارة بمحافظة تعز، "
                   "بالتعاون مع الأجهزة الأمنية، لتنفيذ حملة تفتيش ميدانية تستهدف ضبط المخالفين.",
        "desc_en": "Seven field committees inspected markets to enforce prices after currency "
                   "appreciation, with CPA logistical support.",
    },
    {
        "id": "3",
        "image": "https://images.unsplash.com/photo-1608686207856-001b95cf60ca?auto=format&fit=crop&w=800&q=80",
        "date": "01 Sep 2025",
        "title_key": "news_food_title",
        "title_ar": "تحذير بشأن الوجبات الجاهزة",
        "title_en": "Warning: Ready-made Meals",
        "desc_key": "news_food_desc",
        "desc_ar": "تؤكد جمعية حماية المستهلك – تعز على المواطنين الحذر والترقب وضرورة الحرص "
                   "عند شراء المخبوزات أو الوجبات الجاهزة والدواجن المشوية.",
        "desc_en": "CPA urges caution when buying baked goods/poultry, checking weights/hygiene, "
                   "and reporting violations.",
    },
]

SERVICES_DATA = [
    {"icon": Icon.SEARCH, "title_key": "srv_1_title", "desc_key": "srv_1_desc"},
    {"icon": Icon.BALANCE, "title_key": "srv_2_title", "desc_key": "srv_2_desc"},
    {"icon": Icon.BULLHORN, "title_key": "srv_3_title", "desc_key": "srv_3_desc"},
]

DASHBOARD_STATS = [
    {"value": "1,250+", "label_key": "stat_reports"},
    {"value": "98%", "label_key": "stat_resolved"},
    {"value": "500+", "label_key": "stat_inspections"},
]

INITIAL_JOBS = [
    {
        "id": "1",
        "title_ar": "محامي قضايا تجارية",
        "title_en": "Commercial Lawyer",
        "type": "Part-time",
        "location": "Taiz City",
        "description_ar": "مطلوب محامي ذو خبرة في القوانين التجارية اليمنية لتمثيل الجمعية "
                          "في قضايا حماية المستهلك.",
        "description_en": "Seeking an experienced lawyer in Yemeni commercial laws to represent "
                          "the association in consumer protection cases.",
        "deadline": "2023-12-30",
        "posted_date": "2023-11-01",
    },
    {
        "id": "2",
        "title_ar": "متطوع ميداني - رصد أسعار",
        "title_en": "Field Volunteer - Price Monitoring",
        "type": "Volunteer",
        "location": "Al-Qahira District",
        "description_ar": "نبحث عن شباب متحمسين للمساعدة في رصد أسعار السلع الأساسية بشكل دوري.",
        "description_en": "We are looking for enthusiastic youth to help monitor basic commodity "
                          "prices regularly.",
        "deadline": "Open",
        "posted_date": "2023-11-05",
    },
]

INITIAL_MEDIA = [
    {"id": "1", "type": "video",
     "url": "https://images.unsplash.com/photo-1541818869156-d3d134141542?auto=format&fit=crop&w=800&q=80",
     "caption_ar": "تصريح رئيس الجمعية في قناة تعز تايم",
     "caption_en": "Association President Statement", "date": "2025-08-02"},
    {"id": "2", "type": "image",
     "url": "https://images.unsplash.com/photo-1577962917302-cd874c4e31d2?auto=format&fit=crop&w=800&q=80",
     "caption_ar": "اجتماع مناقشة الرسوم الدراسية",
     "caption_en": "School Fees Discussion Meeting", "date": "2025-11-10"},
    {"id": "3", "type": "image",
     "url": "https://images.unsplash.com/photo-1626125345510-470304d4150c?auto=format&fit=crop&w=800&q=80",
     "caption_ar": "وقفة احتجاجية: الدواء خدمة لا سلعة",
     "caption_en": "Protest: Medicine is a service, not a commodity", "date": "2025-09-01"},
]

INITIAL_PROFILE = {
    "mission_ar": "حماية حقوق المستهلك في الحصول على سلع وخدمات آمنة وبأسعار عادلة، "
                  "وتعزيز الوعي الاستهلاكي في المجتمع.",
    "mission_en": "Protecting consumer rights to access safe goods and services at fair prices, "
                  "and promoting consumer awareness in society.",
    "vision_ar": "أن نكون الصوت الأول والمدافع الأقوى عن حقوق المستهلك في الجمهورية اليمنية.",
    "vision_en": "To be the leading voice and strongest defender of consumer rights in the "
                 "Republic of Yemen.",
    "about_ar": "جمعية حماية المستهلك - تعز، هي منظمة مجتمع مدني غير ربحية، تأسست وفقاً لقانون "
                "الجمعيات والمؤسسات الأهلية، وتعمل بموجب قانون حماية المستهلك اليمني رقم (46) "
                "لسنة 2008.",
    "about_en": "Consumer Protection Association - Taiz is a non-profit civil society "
                "organization, established under the Law of Associations and Foundations, "
                "operating under the Yemeni Consumer Protection Law No. (46) of 2008.",
    "phone": "+967 4 123456",
    "email": "info@cpa-ye.org",
    "address_ar": "شارع جمال، تعز، الجمهورية اليمنية",
    "address_en": "Gamal Street, Taiz, Republic of Yemen",
}

CRM_STATS = {
    "total_donors": 145,
    "active_projects": 12,
    "total_donations": 2500000,
    "last_sync": "2023-11-10 09:30 AM",
}

PARTNERS_DATA = [
    {"id": "1", "name_ar": "وزارة الصناعة والتجارة", "name_en": "Ministry of Industry & Trade",
     "logo": "https://via.placeholder.com/150?text=MOIT"},
    {"id": "2", "name_ar": "الغرفة التجارية - تعز", "name_en": "Taiz Chamber of Commerce",
     "logo": "https://via.placeholder.com/150?text=COC"},
    {"id": "3", "name_ar": "برنامج الأمم المتحدة الإنمائي", "name_en": "UNDP",
     "logo": "https://via.placeholder.com/150?text=UNDP"},
    {"id": "4", "name_ar": "منظمة الصحة العالمية", "name_en": "WHO",
     "logo": "https://via.placeholder.com/150?text=WHO"},
]

CURRENCY_RATES = [
    {"currency": "USD", "buy": 1650, "sell": 1660, "indicator": "stable"},
    {"currency": "SAR", "buy": 435, "sell": 438, "indicator": "up"},
]
