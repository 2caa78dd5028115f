from pearl.domain.astrology.schemas import ZodiacSign


SUN_THEMES = {
    ZodiacSign.ARIES: "Pioneering courage and bold action",
    ZodiacSign.TAURUS: "Building lasting value and sensory richness",
    ZodiacSign.GEMINI: "Connecting ideas and communicating truth",
    ZodiacSign.CANCER: "Nurturing and creating emotional sanctuary",
    ZodiacSign.LEO: "Creative self-expression and radiant leadership",
    ZodiacSign.VIRGO: "Sacred service and devotion to craft",
    ZodiacSign.LIBRA: "Creating harmony, beauty, and just relationships",
    ZodiacSign.SCORPIO: "Transformative depth and regenerative power",
    ZodiacSign.SAGITTARIUS: "Expanding horizons and seeking higher truth",
    ZodiacSign.CAPRICORN: "Building enduring structures and earned authority",
    ZodiacSign.AQUARIUS: "Innovating for the collective and honoring uniqueness",
    ZodiacSign.PISCES: "Channeling compassion and transcendent vision",
}

NORTH_NODE_THEMES = {
    ZodiacSign.ARIES: "Independent action, courage, and self-leadership",
    ZodiacSign.TAURUS: "Stability, self-worth, and trusting your own values",
    ZodiacSign.GEMINI: "Curiosity, communication, and embracing many perspectives",
    ZodiacSign.CANCER: "Emotional vulnerability, home, and nurturing others",
    ZodiacSign.LEO: "Creative self-expression, joy, and being seen",
    ZodiacSign.VIRGO: "Humble service, practical wisdom, and sacred routine",
    ZodiacSign.LIBRA: "Partnership, diplomacy, and learning to receive",
    ZodiacSign.SCORPIO: "Deep transformation, shared resources, and intimate trust",
    ZodiacSign.SAGITTARIUS: "Big-picture meaning, faith, and philosophical expansion",
    ZodiacSign.CAPRICORN: "Mastery, public contribution, and responsible leadership",
    ZodiacSign.AQUARIUS: "Community, innovation, and humanitarian vision",
    ZodiacSign.PISCES: "Surrender, spiritual connection, and unconditional compassion",
}

SATURN_THEMES = {
    ZodiacSign.ARIES: "Learning to stand alone and trust your instincts",
    ZodiacSign.TAURUS: "Building material security through patience and persistence",
    ZodiacSign.GEMINI: "Mastering communication and disciplined thinking",
    ZodiacSign.CANCER: "Emotional maturity and building true security within",
    ZodiacSign.LEO: "Earned confidence and authentic creative authority",
    ZodiacSign.VIRGO: "Perfecting your craft through humble, steady practice",
    ZodiacSign.LIBRA: "Mastering committed relationships and fair negotiation",
    ZodiacSign.SCORPIO: "Facing shadows with courage and building inner power",
    ZodiacSign.SAGITTARIUS: "Grounding your beliefs in real-world wisdom",
    ZodiacSign.CAPRICORN: "Ultimate mastery in the sign Saturn rules, building empires",
    ZodiacSign.AQUARIUS: "Structuring your vision for the collective good",
    ZodiacSign.PISCES: "Giving form to the formless through disciplined spirituality",
}

MIDHEAVEN_THEMES = {
    ZodiacSign.ARIES: "Leadership, entrepreneurship, and blazing trails in public",
    ZodiacSign.TAURUS: "Building tangible beauty and lasting financial wisdom",
    ZodiacSign.GEMINI: "Communication, media, teaching, and connecting ideas publicly",
    ZodiacSign.CANCER: "Caregiving, real estate, food, and emotional intelligence in career",
    ZodiacSign.LEO: "Performance, creative direction, and inspiring others publicly",
    ZodiacSign.VIRGO: "Health, analysis, service, and meticulous excellence in your field",
    ZodiacSign.LIBRA: "Law, design, diplomacy, and creating aesthetic harmony",
    ZodiacSign.SCORPIO: "Psychology, research, transformation, and working with hidden truths",
    ZodiacSign.SAGITTARIUS: "Education, publishing, travel, and expanding cultural horizons",
    ZodiacSign.CAPRICORN: "Executive leadership, institution-building, and earned authority",
    ZodiacSign.AQUARIUS: "Technology, social change, and innovation that serves the future",
    ZodiacSign.PISCES: "Healing arts, music, spirituality, and compassionate service",
}
