from pearl.domain.kabbalah.schemas import Sephirah, SoulCorrection


SEPHIROT = [
    Sephirah(name="Keter", hebrew_name="כתר", meaning="Crown", quality="Divine Will, the source of all creation", position=1),
    Sephirah(name="Chokmah", hebrew_name="חכמה", meaning="Wisdom", quality="The first flash of inspiration, raw creative force", position=2),
    Sephirah(name="Binah", hebrew_name="בינה", meaning="Understanding", quality="The womb of creation, where ideas take form", position=3),
    Sephirah(name="Chesed", hebrew_name="חסד", meaning="Mercy", quality="Unconditional love, expansion, generosity", position=4),
    Sephirah(name="Gevurah", hebrew_name="גבורה", meaning="Strength", quality="Discipline, boundaries, the power to refine", position=5),
    Sephirah(name="Tiferet", hebrew_name="תפארת", meaning="Beauty", quality="Harmony, balance, the heart of the Tree", position=6),
    Sephirah(name="Netzach", hebrew_name="נצח", meaning="Victory", quality="Endurance, eternity, creative persistence", position=7),
    Sephirah(name="Hod", hebrew_name="הוד", meaning="Splendor", quality="Intellect, communication, surrender to truth", position=8),
    Sephirah(name="Yesod", hebrew_name="יסוד", meaning="Foundation", quality="Connection, dreams, the bridge between worlds", position=9),
    Sephirah(name="Malkhut", hebrew_name="מלכות", meaning="Kingdom", quality="Manifestation, the physical world, grounding", position=10),
]


# number, name, description, challenge, correction
_SOUL_CORRECTION_ROWS = [
    (1, "Time Travel", "You have the ability to transcend linear time through consciousness.", "Impatience with the present moment", "Learning to be fully present while holding vision of the future"),
    (2, "Recapturing the Sparks", "Your soul seeks to gather scattered fragments of light.", "Feeling scattered or unfocused", "Gathering your energy and finding wholeness within"),
    (3, "Miracle Making", "You carry the potential to manifest the extraordinary.", "Doubt in your own power", "Trusting in the miraculous nature of your being"),
    (4, "Eliminating Negative Thoughts", "Your mind is a powerful creator.", "Negative self-talk and limiting beliefs", "Mastering the mind and choosing thoughts that serve your highest self"),
    (5, "Healing", "You are a natural healer of yourself and others.", "Taking on others' pain as your own", "Learning to heal through Light rather than through absorption"),
    (6, "Dream State", "You access higher realms through dreams and vision.", "Escapism and avoiding reality", "Grounding spiritual insight into practical action"),
    (7, "DNA of the Soul", "Your essence carries deep ancestral wisdom.", "Repeating family patterns unconsciously", "Breaking generational chains through conscious awareness"),
    (8, "Defying Gravity", "You are meant to transcend limitations.", "Feeling weighed down by the physical world", "Rising above circumstances through spiritual lightness"),
    (9, "Angelic Influences", "You have a strong connection to angelic realms.", "Feeling ungrounded or too ethereal", "Bridging heaven and earth in daily life"),
    (10, "Looks Can Kill", "Your gaze carries immense power.", "Using personal magnetism for ego", "Directing your power toward blessing others"),
    (11, "Letting Go", "Freedom comes through release.", "Holding on too tightly to outcomes", "Surrendering control and trusting the flow of life"),
    (12, "Unconditional Love", "Your path leads to love without conditions.", "Placing conditions on love and acceptance", "Opening the heart to love all beings as they are"),
    (13, "Heaven on Earth", "You are meant to bring paradise into the material world.", "Seeing spiritual and material as separate", "Infusing every moment with sacred awareness"),
    (14, "Farewell to Arms", "Peace is your ultimate destination.", "Engaging in unnecessary conflicts", "Choosing peace over being right"),
    (15, "Long-Range Vision", "You see further than most.", "Frustration when others cannot see what you see", "Patience with the unfolding of your vision"),
    (16, "Dumping Depression", "Joy is your birthright.", "Cycles of melancholy and heaviness", "Choosing joy as a spiritual practice"),
    (17, "Great Escape", "You seek liberation in all forms.", "Running from difficult situations", "Finding freedom within constraints"),
    (18, "Fertility", "You create abundance wherever you go.", "Fear of scarcity or not having enough", "Trusting in your infinite creative capacity"),
    (19, "Dialing God", "Direct connection to the Divine is your gift.", "Feeling spiritually disconnected", "Cultivating constant communion with the sacred"),
    (20, "Victory Over Addictions", "Freedom from compulsive patterns.", "Addictive tendencies in various forms", "Filling the void with spiritual nourishment"),
    (21, "Eradicate Plague", "You have the power to transform collective suffering.", "Absorbing collective negativity", "Transmuting darkness into light for the collective"),
    (22, "Stop Fatal Attraction", "Wisdom in relationships.", "Attraction to harmful patterns", "Choosing relationships that elevate your soul"),
    (23, "Sharing the Flame", "Your light is meant to be shared.", "Hoarding wisdom or hiding your gifts", "Generously sharing your spiritual light"),
    (24, "Jealousy", "Transforming envy into inspiration.", "Comparing yourself to others", "Celebrating others' success as your own"),
    (25, "Speak Your Mind", "Truth is your currency.", "Fear of speaking your truth", "Finding the courage to voice what you know"),
    (26, "Order from Chaos", "You bring structure to the formless.", "Feeling overwhelmed by disorder", "Finding the sacred pattern within apparent chaos"),
    (27, "Silent Partner", "Power through stillness.", "Needing external validation", "Finding strength in quiet inner knowing"),
    (28, "Soul Mate", "Deep partnership is your teacher.", "Codependency or fear of intimacy", "Becoming whole within to attract wholeness"),
    (29, "Removing Hatred", "Love dissolves all barriers.", "Harboring resentment or judgment", "Practicing radical forgiveness"),
    (30, "Building Bridges", "You connect what is divided.", "Taking sides in conflicts", "Seeing the unity beneath all division"),
    (31, "Finish What You Start", "Completion is your mastery.", "Starting many things, finishing few", "Honoring commitments through to their natural end"),
    (32, "Memories", "The past holds keys to your future.", "Being trapped by past experiences", "Mining wisdom from memory without being enslaved by it"),
    (33, "Revealing the Dark Side", "Shadow work is your path.", "Denying your shadow aspects", "Embracing and integrating all parts of yourself"),
    (34, "Forget Thyself", "Service dissolves the ego.", "Self-centeredness or narcissism", "Finding yourself through selfless service"),
    (35, "Sexual Energy", "Creative life force flows through you.", "Misusing sexual or creative energy", "Channeling creative energy toward sacred purposes"),
    (36, "Fearless", "Courage is your essence.", "Hidden fears controlling decisions", "Walking directly toward what you fear most"),
    (37, "The Big Picture", "You see the grand design.", "Getting lost in details", "Maintaining perspective of the whole while attending to parts"),
    (38, "Circuitry", "You are a conduit for cosmic energy.", "Energetic overwhelm or burnout", "Learning to conduct energy without depleting yourself"),
    (39, "Diamond in the Rough", "Pressure creates your brilliance.", "Resisting necessary challenges", "Embracing difficulty as your path to refinement"),
    (40, "Global Transformation", "Your personal change ripples outward.", "Feeling too small to make a difference", "Understanding that your transformation transforms the world"),
    (41, "Self-Appreciation", "You are worthy simply because you exist.", "Chronic self-deprecation", "Recognizing your inherent divine worth"),
    (42, "Revealing the Concealed", "You see what is hidden.", "Using insight manipulatively", "Revealing truth with compassion and timing"),
    (43, "Defying Death", "You transcend mortality through consciousness.", "Fear of death and endings", "Living so fully that death becomes irrelevant"),
    (44, "Sweetening Judgment", "Mercy tempers justice.", "Being overly critical of self and others", "Balancing discernment with compassion"),
    (45, "The Power of Prosperity", "Abundance is your natural state.", "Guilt around wealth or success", "Receiving abundantly and sharing generously"),
    (46, "Absolute Certainty", "Faith beyond evidence.", "Needing proof before believing", "Cultivating certainty in the unseen"),
    (47, "Global Communication", "Your words reach far.", "Miscommunication or gossip", "Speaking words that heal and unite"),
    (48, "Unity", "Oneness is your truth.", "Feeling separate or isolated", "Experiencing the interconnection of all life"),
    (49, "Happiness", "Joy is a choice and a practice.", "Conditional happiness", "Choosing happiness regardless of circumstances"),
    (50, "Enough Is Never Enough", "Learning the art of satisfaction.", "Constant craving for more", "Finding completeness in what is"),
    (51, "No Guilt", "Freedom from false guilt.", "Carrying guilt that isn't yours", "Releasing guilt and stepping into innocence"),
    (52, "Passion", "Deep feeling is your fuel.", "Emotional overwhelm or numbness", "Channeling passion into purposeful creation"),
    (53, "No Agenda", "Pure being without manipulation.", "Hidden agendas in relationships", "Relating with pure authenticity"),
    (54, "The Death of Death", "You transcend all endings.", "Resistance to transformation", "Welcoming each death as a doorway to rebirth"),
    (55, "Thought into Action", "Your thoughts manifest reality.", "Overthinking without acting", "Translating inspiration into embodied action"),
    (56, "Dispelling Anger", "Transforming rage into power.", "Suppressed or explosive anger", "Alchemizing anger into constructive force"),
    (57, "Listen to Your Heart", "The heart knows the way.", "Overriding heart wisdom with logic", "Trusting the intelligence of the heart"),
    (58, "Letting Go of Ego", "True power lies beyond ego.", "Ego-driven decisions and identity", "Discovering who you are beyond the ego"),
    (59, "Umbilical Cord", "Connection to source.", "Feeling cut off from spiritual nourishment", "Remembering your eternal connection to the Divine"),
    (60, "Spiritual Cleansing", "Purification of the soul.", "Accumulating spiritual density", "Regular practices of energetic clearing and renewal"),
    (61, "Water", "Flow is your nature.", "Rigidity and resistance to change", "Becoming like water: adaptable, powerful, and life-giving"),
    (62, "Parent-Loss", "Transcending parental wounds.", "Unresolved parental relationships", "Becoming your own loving parent"),
    (63, "Appreciation", "Gratitude transforms everything.", "Taking life for granted", "Cultivating deep appreciation for every breath"),
    (64, "Casting Off Negativity", "You shed what no longer serves.", "Absorbing environmental negativity", "Maintaining your light regardless of surroundings"),
    (65, "Spiritual Umbilical Cord", "Your connection to the infinite.", "Spiritual dryness or disconnection", "Nurturing your invisible connection to all that is"),
    (66, "Accountability", "Owning your creation.", "Blaming external circumstances", "Taking full responsibility for your life experience"),
    (67, "Great Expectations", "Release attachment to outcomes.", "Disappointment when reality doesn't match expectations", "Surrendering expectations while maintaining intention"),
    (68, "Contacting Departed Souls", "You bridge the worlds of living and passed.", "Grief or fear of death", "Understanding death as a doorway, not an ending"),
    (69, "Lost and Found", "What was lost returns transformed.", "Mourning what you've lost", "Trusting that nothing is ever truly lost"),
    (70, "Remembering", "Ancient knowledge lives within you.", "Forgetting your true nature", "Awakening the deep memory of who you really are"),
    (71, "Prophecy and Parallel Universes", "You sense multiple timelines.", "Confusion about which path to take", "Trusting your inner sight to guide you through possibilities"),
    (72, "Spiritual Cleansing", "The final purification.", "Carrying collective karma", "Serving as a vessel of purification for the world"),
]

SOUL_CORRECTIONS = [
    SoulCorrection(
        number=number,
        name=name,
        description=description,
        challenge=challenge,
        correction=correction,
    )
    for number, name, description, challenge, correction in _SOUL_CORRECTION_ROWS
]


# Gematria-style letter values
LETTER_VALUES = {
    "a": 1, "b": 2, "c": 3, "d": 4, "e": 5, "f": 6, "g": 7, "h": 8, "i": 9,
    "j": 10, "k": 20, "l": 30, "m": 40, "n": 50, "o": 60, "p": 70, "q": 80, "r": 90,
    "s": 100, "t": 200, "u": 300, "v": 400, "w": 500, "x": 600, "y": 700, "z": 800,
}
