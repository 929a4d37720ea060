# encoding: utf8
"""English names for the numeric codes stored in records.

Each table is indexed by the code the games use; index 0 is the "nothing"
value.
"""

SPECIES = (
    u'None',
    u'Bulbasaur', u'Ivysaur', u'Venusaur', u'Charmander', u'Charmeleon',  # 1
    u'Charizard', u'Squirtle', u'Wartortle', u'Blastoise', u'Caterpie',
    u'Metapod', u'Butterfree', u'Weedle', u'Kakuna', u'Beedrill',  # 11
    u'Pidgey', u'Pidgeotto', u'Pidgeot', u'Rattata', u'Raticate',
    u'Spearow', u'Fearow', u'Ekans', u'Arbok', u'Pikachu',  # 21
    u'Raichu', u'Sandshrew', u'Sandslash', u'Nidoran♀', u'Nidorina',
    u'Nidoqueen', u'Nidoran♂', u'Nidorino', u'Nidoking', u'Clefairy',  # 31
    u'Clefable', u'Vulpix', u'Ninetales', u'Jigglypuff', u'Wigglytuff',
    u'Zubat', u'Golbat', u'Oddish', u'Gloom', u'Vileplume',  # 41
    u'Paras', u'Parasect', u'Venonat', u'Venomoth', u'Diglett',
    u'Dugtrio', u'Meowth', u'Persian', u'Psyduck', u'Golduck',  # 51
    u'Mankey', u'Primeape', u'Growlithe', u'Arcanine', u'Poliwag',
    u'Poliwhirl', u'Poliwrath', u'Abra', u'Kadabra', u'Alakazam',  # 61
    u'Machop', u'Machoke', u'Machamp', u'Bellsprout', u'Weepinbell',
    u'Victreebel', u'Tentacool', u'Tentacruel', u'Geodude', u'Graveler',  # 71
    u'Golem', u'Ponyta', u'Rapidash', u'Slowpoke', u'Slowbro',
    u'Magnemite', u'Magneton', u"Farfetch'd", u'Doduo', u'Dodrio',  # 81
    u'Seel', u'Dewgong', u'Grimer', u'Muk', u'Shellder',
    u'Cloyster', u'Gastly', u'Haunter', u'Gengar', u'Onix',  # 91
    u'Drowzee', u'Hypno', u'Krabby', u'Kingler', u'Voltorb',
    u'Electrode', u'Exeggcute', u'Exeggutor', u'Cubone', u'Marowak',  # 101
    u'Hitmonlee', u'Hitmonchan', u'Lickitung', u'Koffing', u'Weezing',
    u'Rhyhorn', u'Rhydon', u'Chansey', u'Tangela', u'Kangaskhan',  # 111
    u'Horsea', u'Seadra', u'Goldeen', u'Seaking', u'Staryu',
    u'Starmie', u'Mr. Mime', u'Scyther', u'Jynx', u'Electabuzz',  # 121
    u'Magmar', u'Pinsir', u'Tauros', u'Magikarp', u'Gyarados',
    u'Lapras', u'Ditto', u'Eevee', u'Vaporeon', u'Jolteon',  # 131
    u'Flareon', u'Porygon', u'Omanyte', u'Omastar', u'Kabuto',
    u'Kabutops', u'Aerodactyl', u'Snorlax', u'Articuno', u'Zapdos',  # 141
    u'Moltres', u'Dratini', u'Dragonair', u'Dragonite', u'Mewtwo',
    u'Mew', u'Chikorita', u'Bayleef', u'Meganium', u'Cyndaquil',  # 151
    u'Quilava', u'Typhlosion', u'Totodile', u'Croconaw', u'Feraligatr',
    u'Sentret', u'Furret', u'Hoothoot', u'Noctowl', u'Ledyba',  # 161
    u'Ledian', u'Spinarak', u'Ariados', u'Crobat', u'Chinchou',
    u'Lanturn', u'Pichu', u'Cleffa', u'Igglybuff', u'Togepi',  # 171
    u'Togetic', u'Natu', u'Xatu', u'Mareep', u'Flaaffy',
    u'Ampharos', u'Bellossom', u'Marill', u'Azumarill', u'Sudowoodo',  # 181
    u'Politoed', u'Hoppip', u'Skiploom', u'Jumpluff', u'Aipom',
    u'Sunkern', u'Sunflora', u'Yanma', u'Wooper', u'Quagsire',  # 191
    u'Espeon', u'Umbreon', u'Murkrow', u'Slowking', u'Misdreavus',
    u'Unown', u'Wobbuffet', u'Girafarig', u'Pineco', u'Forretress',  # 201
    u'Dunsparce', u'Gligar', u'Steelix', u'Snubbull', u'Granbull',
    u'Qwilfish', u'Scizor', u'Shuckle', u'Heracross', u'Sneasel',  # 211
    u'Teddiursa', u'Ursaring', u'Slugma', u'Magcargo', u'Swinub',
    u'Piloswine', u'Corsola', u'Remoraid', u'Octillery', u'Delibird',  # 221
    u'Mantine', u'Skarmory', u'Houndour', u'Houndoom', u'Kingdra',
    u'Phanpy', u'Donphan', u'Porygon2', u'Stantler', u'Smeargle',  # 231
    u'Tyrogue', u'Hitmontop', u'Smoochum', u'Elekid', u'Magby',
    u'Miltank', u'Blissey', u'Raikou', u'Entei', u'Suicune',  # 241
    u'Larvitar', u'Pupitar', u'Tyranitar', u'Lugia', u'Ho-Oh',
    u'Celebi', u'Treecko', u'Grovyle', u'Sceptile', u'Torchic',  # 251
    u'Combusken', u'Blaziken', u'Mudkip', u'Marshtomp', u'Swampert',
    u'Poochyena', u'Mightyena', u'Zigzagoon', u'Linoone', u'Wurmple',  # 261
    u'Silcoon', u'Beautifly', u'Cascoon', u'Dustox', u'Lotad',
    u'Lombre', u'Ludicolo', u'Seedot', u'Nuzleaf', u'Shiftry',  # 271
    u'Taillow', u'Swellow', u'Wingull', u'Pelipper', u'Ralts',
    u'Kirlia', u'Gardevoir', u'Surskit', u'Masquerain', u'Shroomish',  # 281
    u'Breloom', u'Slakoth', u'Vigoroth', u'Slaking', u'Nincada',
    u'Ninjask', u'Shedinja', u'Whismur', u'Loudred', u'Exploud',  # 291
    u'Makuhita', u'Hariyama', u'Azurill', u'Nosepass', u'Skitty',
    u'Delcatty', u'Sableye', u'Mawile', u'Aron', u'Lairon',  # 301
    u'Aggron', u'Meditite', u'Medicham', u'Electrike', u'Manectric',
    u'Plusle', u'Minun', u'Volbeat', u'Illumise', u'Roselia',  # 311
    u'Gulpin', u'Swalot', u'Carvanha', u'Sharpedo', u'Wailmer',
    u'Wailord', u'Numel', u'Camerupt', u'Torkoal', u'Spoink',  # 321
    u'Grumpig', u'Spinda', u'Trapinch', u'Vibrava', u'Flygon',
    u'Cacnea', u'Cacturne', u'Swablu', u'Altaria', u'Zangoose',  # 331
    u'Seviper', u'Lunatone', u'Solrock', u'Barboach', u'Whiscash',
    u'Corphish', u'Crawdaunt', u'Baltoy', u'Claydol', u'Lileep',  # 341
    u'Cradily', u'Anorith', u'Armaldo', u'Feebas', u'Milotic',
    u'Castform', u'Kecleon', u'Shuppet', u'Banette', u'Duskull',  # 351
    u'Dusclops', u'Tropius', u'Chimecho', u'Absol', u'Wynaut',
    u'Snorunt', u'Glalie', u'Spheal', u'Sealeo', u'Walrein',  # 361
    u'Clamperl', u'Huntail', u'Gorebyss', u'Relicanth', u'Luvdisc',
    u'Bagon', u'Shelgon', u'Salamence', u'Beldum', u'Metang',  # 371
    u'Metagross', u'Regirock', u'Regice', u'Registeel', u'Latias',
    u'Latios', u'Kyogre', u'Groudon', u'Rayquaza', u'Jirachi',  # 381
    u'Deoxys', u'Turtwig', u'Grotle', u'Torterra', u'Chimchar',
    u'Monferno', u'Infernape', u'Piplup', u'Prinplup', u'Empoleon',  # 391
    u'Starly', u'Staravia', u'Staraptor', u'Bidoof', u'Bibarel',
    u'Kricketot', u'Kricketune', u'Shinx', u'Luxio', u'Luxray',  # 401
    u'Budew', u'Roserade', u'Cranidos', u'Rampardos', u'Shieldon',
    u'Bastiodon', u'Burmy', u'Wormadam', u'Mothim', u'Combee',  # 411
    u'Vespiquen', u'Pachirisu', u'Buizel', u'Floatzel', u'Cherubi',
    u'Cherrim', u'Shellos', u'Gastrodon', u'Ambipom', u'Drifloon',  # 421
    u'Drifblim', u'Buneary', u'Lopunny', u'Mismagius', u'Honchkrow',
    u'Glameow', u'Purugly', u'Chingling', u'Stunky', u'Skuntank',  # 431
    u'Bronzor', u'Bronzong', u'Bonsly', u'Mime Jr.', u'Happiny',
    u'Chatot', u'Spiritomb', u'Gible', u'Gabite', u'Garchomp',  # 441
    u'Munchlax', u'Riolu', u'Lucario', u'Hippopotas', u'Hippowdon',
    u'Skorupi', u'Drapion', u'Croagunk', u'Toxicroak', u'Carnivine',  # 451
    u'Finneon', u'Lumineon', u'Mantyke', u'Snover', u'Abomasnow',
    u'Weavile', u'Magnezone', u'Lickilicky', u'Rhyperior', u'Tangrowth',  # 461
    u'Electivire', u'Magmortar', u'Togekiss', u'Yanmega', u'Leafeon',
    u'Glaceon', u'Gliscor', u'Mamoswine', u'Porygon-Z', u'Gallade',  # 471
    u'Probopass', u'Dusknoir', u'Froslass', u'Rotom', u'Uxie',
    u'Mesprit', u'Azelf', u'Dialga', u'Palkia', u'Heatran',  # 481
    u'Regigigas', u'Giratina', u'Cresselia', u'Phione', u'Manaphy',
    u'Darkrai', u'Shaymin', u'Arceus', u'Victini', u'Snivy',  # 491
    u'Servine', u'Serperior', u'Tepig', u'Pignite', u'Emboar',
    u'Oshawott', u'Dewott', u'Samurott', u'Patrat', u'Watchog',  # 501
    u'Lillipup', u'Herdier', u'Stoutland', u'Purrloin', u'Liepard',
    u'Pansage', u'Simisage', u'Pansear', u'Simisear', u'Panpour',  # 511
    u'Simipour', u'Munna', u'Musharna', u'Pidove', u'Tranquill',
    u'Unfezant', u'Blitzle', u'Zebstrika', u'Roggenrola', u'Boldore',  # 521
    u'Gigalith', u'Woobat', u'Swoobat', u'Drilbur', u'Excadrill',
    u'Audino', u'Timburr', u'Gurdurr', u'Conkeldurr', u'Tympole',  # 531
    u'Palpitoad', u'Seismitoad', u'Throh', u'Sawk', u'Sewaddle',
    u'Swadloon', u'Leavanny', u'Venipede', u'Whirlipede', u'Scolipede',  # 541
    u'Cottonee', u'Whimsicott', u'Petilil', u'Lilligant', u'Basculin',
    u'Sandile', u'Krokorok', u'Krookodile', u'Darumaka', u'Darmanitan',  # 551
    u'Maractus', u'Dwebble', u'Crustle', u'Scraggy', u'Scrafty',
    u'Sigilyph', u'Yamask', u'Cofagrigus', u'Tirtouga', u'Carracosta',  # 561
    u'Archen', u'Archeops', u'Trubbish', u'Garbodor', u'Zorua',
    u'Zoroark', u'Minccino', u'Cinccino', u'Gothita', u'Gothorita',  # 571
    u'Gothitelle', u'Solosis', u'Duosion', u'Reuniclus', u'Ducklett',
    u'Swanna', u'Vanillite', u'Vanillish', u'Vanilluxe', u'Deerling',  # 581
    u'Sawsbuck', u'Emolga', u'Karrablast', u'Escavalier', u'Foongus',
    u'Amoonguss', u'Frillish', u'Jellicent', u'Alomomola', u'Joltik',  # 591
    u'Galvantula', u'Ferroseed', u'Ferrothorn', u'Klink', u'Klang',
    u'Klinklang', u'Tynamo', u'Eelektrik', u'Eelektross', u'Elgyem',  # 601
    u'Beheeyem', u'Litwick', u'Lampent', u'Chandelure', u'Axew',
    u'Fraxure', u'Haxorus', u'Cubchoo', u'Beartic', u'Cryogonal',  # 611
    u'Shelmet', u'Accelgor', u'Stunfisk', u'Mienfoo', u'Mienshao',
    u'Druddigon', u'Golett', u'Golurk', u'Pawniard', u'Bisharp',  # 621
    u'Bouffalant', u'Rufflet', u'Braviary', u'Vullaby', u'Mandibuzz',
    u'Heatmor', u'Durant', u'Deino', u'Zweilous', u'Hydreigon',  # 631
    u'Larvesta', u'Volcarona', u'Cobalion', u'Terrakion', u'Virizion',
    u'Tornadus', u'Thundurus', u'Reshiram', u'Zekrom', u'Landorus',  # 641
    u'Kyurem', u'Keldeo', u'Meloetta', u'Genesect', u'Chespin',
    u'Quilladin', u'Chesnaught', u'Fennekin', u'Braixen', u'Delphox',  # 651
    u'Froakie', u'Frogadier', u'Greninja', u'Bunnelby', u'Diggersby',
    u'Fletchling', u'Fletchinder', u'Talonflame', u'Scatterbug', u'Spewpa',  # 661
    u'Vivillon', u'Litleo', u'Pyroar', u'Flabébé', u'Floette',
    u'Florges', u'Skiddo', u'Gogoat', u'Pancham', u'Pangoro',  # 671
    u'Furfrou', u'Espurr', u'Meowstic', u'Honedge', u'Doublade',
    u'Aegislash', u'Spritzee', u'Aromatisse', u'Swirlix', u'Slurpuff',  # 681
    u'Inkay', u'Malamar', u'Binacle', u'Barbaracle', u'Skrelp',
    u'Dragalge', u'Clauncher', u'Clawitzer', u'Helioptile', u'Heliolisk',  # 691
    u'Tyrunt', u'Tyrantrum', u'Amaura', u'Aurorus', u'Sylveon',
    u'Hawlucha', u'Dedenne', u'Carbink', u'Goomy', u'Sliggoo',  # 701
    u'Goodra', u'Klefki', u'Phantump', u'Trevenant', u'Pumpkaboo',
    u'Gourgeist', u'Bergmite', u'Avalugg', u'Noibat', u'Noivern',  # 711
    u'Xerneas', u'Yveltal', u'Zygarde', u'Diancie', u'Hoopa',
    u'Volcanion', u'Rowlet', u'Dartrix', u'Decidueye', u'Litten',  # 721
    u'Torracat', u'Incineroar', u'Popplio', u'Brionne', u'Primarina',
    u'Pikipek', u'Trumbeak', u'Toucannon', u'Yungoos', u'Gumshoos',  # 731
    u'Grubbin', u'Charjabug', u'Vikavolt', u'Crabrawler', u'Crabominable',
    u'Oricorio', u'Cutiefly', u'Ribombee', u'Rockruff', u'Lycanroc',  # 741
    u'Wishiwashi', u'Mareanie', u'Toxapex', u'Mudbray', u'Mudsdale',
    u'Dewpider', u'Araquanid', u'Fomantis', u'Lurantis', u'Morelull',  # 751
    u'Shiinotic', u'Salandit', u'Salazzle', u'Stufful', u'Bewear',
    u'Bounsweet', u'Steenee', u'Tsareena', u'Comfey', u'Oranguru',  # 761
    u'Passimian', u'Wimpod', u'Golisopod', u'Sandygast', u'Palossand',
    u'Pyukumuku', u'Type: Null', u'Silvally', u'Minior', u'Komala',  # 771
    u'Turtonator', u'Togedemaru', u'Mimikyu', u'Bruxish', u'Drampa',
    u'Dhelmise', u'Jangmo-o', u'Hakamo-o', u'Kommo-o', u'Tapu Koko',  # 781
    u'Tapu Lele', u'Tapu Bulu', u'Tapu Fini', u'Cosmog', u'Cosmoem',
    u'Solgaleo', u'Lunala', u'Nihilego', u'Buzzwole', u'Pheromosa',  # 791
    u'Xurkitree', u'Celesteela', u'Kartana', u'Guzzlord', u'Necrozma',
    u'Magearna', u'Marshadow', u'Poipole', u'Naganadel', u'Stakataka',  # 801
    u'Blacephalon', u'Zeraora', u'Meltan', u'Melmetal', u'Grookey',
    u'Thwackey', u'Rillaboom', u'Scorbunny', u'Raboot', u'Cinderace',  # 811
    u'Sobble', u'Drizzile', u'Inteleon', u'Skwovet', u'Greedent',
    u'Rookidee', u'Corvisquire', u'Corviknight', u'Blipbug', u'Dottler',  # 821
    u'Orbeetle', u'Nickit', u'Thievul', u'Gossifleur', u'Eldegoss',
    u'Wooloo', u'Dubwool', u'Chewtle', u'Drednaw', u'Yamper',  # 831
    u'Boltund', u'Rolycoly', u'Carkol', u'Coalossal', u'Applin',
    u'Flapple', u'Appletun', u'Silicobra', u'Sandaconda', u'Cramorant',  # 841
    u'Arrokuda', u'Barraskewda', u'Toxel', u'Toxtricity', u'Sizzlipede',
    u'Centiskorch', u'Clobbopus', u'Grapploct', u'Sinistea', u'Polteageist',  # 851
    u'Hatenna', u'Hattrem', u'Hatterene', u'Impidimp', u'Morgrem',
    u'Grimmsnarl', u'Obstagoon', u'Perrserker', u'Cursola', u"Sirfetch'd",  # 861
    u'Mr. Rime', u'Runerigus', u'Milcery', u'Alcremie', u'Falinks',
    u'Pincurchin', u'Snom', u'Frosmoth', u'Stonjourner', u'Eiscue',  # 871
    u'Indeedee', u'Morpeko', u'Cufant', u'Copperajah', u'Dracozolt',
    u'Arctozolt', u'Dracovish', u'Arctovish', u'Duraludon', u'Dreepy',  # 881
    u'Drakloak', u'Dragapult', u'Zacian', u'Zamazenta', u'Eternatus',
    u'Kubfu', u'Urshifu', u'Zarude', u'Regieleki', u'Regidrago',  # 891
    u'Glastrier', u'Spectrier', u'Calyrex', u'Wyrdeer', u'Kleavor',
    u'Ursaluna', u'Basculegion', u'Sneasler', u'Overqwil', u'Enamorus',  # 901
    u'Sprigatito', u'Floragato', u'Meowscarada', u'Fuecoco', u'Crocalor',
    u'Skeledirge', u'Quaxly', u'Quaxwell', u'Quaquaval', u'Lechonk',  # 911
    u'Oinkologne', u'Tarountula', u'Spidops', u'Nymble', u'Lokix',
    u'Pawmi', u'Pawmo', u'Pawmot', u'Tandemaus', u'Maushold',  # 921
    u'Fidough', u'Dachsbun', u'Smoliv', u'Dolliv', u'Arboliva',
    u'Squawkabilly', u'Nacli', u'Naclstack', u'Garganacl', u'Charcadet',  # 931
    u'Armarouge', u'Ceruledge', u'Tadbulb', u'Bellibolt', u'Wattrel',
    u'Kilowattrel', u'Maschiff', u'Mabosstiff', u'Shroodle', u'Grafaiai',  # 941
    u'Bramblin', u'Brambleghast', u'Toedscool', u'Toedscruel', u'Klawf',
    u'Capsakid', u'Scovillain', u'Rellor', u'Rabsca', u'Flittle',  # 951
    u'Espathra', u'Tinkatink', u'Tinkatuff', u'Tinkaton', u'Wiglett',
    u'Wugtrio', u'Bombirdier', u'Finizen', u'Palafin', u'Varoom',  # 961
    u'Revavroom', u'Cyclizar', u'Orthworm', u'Glimmet', u'Glimmora',
    u'Greavard', u'Houndstone', u'Flamigo', u'Cetoddle', u'Cetitan',  # 971
    u'Veluza', u'Dondozo', u'Tatsugiri', u'Annihilape', u'Clodsire',
    u'Farigiraf', u'Dudunsparce', u'Kingambit', u'Great Tusk',  # 981
    u'Scream Tail',
    u'Brute Bonnet', u'Flutter Mane', u'Slither Wing', u'Sandy Shocks',
    u'Iron Treads', u'Iron Bundle', u'Iron Hands', u'Iron Jugulis',  # 991
    u'Iron Moth', u'Iron Thorns',
    u'Frigibax', u'Arctibax', u'Baxcalibur', u'Gimmighoul', u'Gholdengo',
    u'Wo-Chien', u'Chien-Pao', u'Ting-Lu', u'Chi-Yu', u'Roaring Moon',  # 1001
    u'Iron Valiant', u'Koraidon', u'Miraidon', u'Walking Wake',
    u'Iron Leaves',
    u'Dipplin', u'Poltchageist', u'Sinistcha', u'Okidogi', u'Munkidori',  # 1011
    u'Fezandipiti', u'Ogerpon', u'Archaludon', u'Hydrapple',
    u'Gouging Fire',
    u'Raging Bolt', u'Iron Boulder', u'Iron Crown', u'Terapagos',  # 1021
    u'Pecharunt',
)

MOVES = (
    u'None',
    u'Pound', u'Karate Chop', u'Double Slap', u'Comet Punch',  # 1
    u'Mega Punch', u'Pay Day', u'Fire Punch', u'Ice Punch',
    u'Thunder Punch', u'Scratch',
    u'Vise Grip', u'Guillotine', u'Razor Wind', u'Swords Dance', u'Cut',  # 11
    u'Gust', u'Wing Attack', u'Whirlwind', u'Fly', u'Bind',
    u'Slam', u'Vine Whip', u'Stomp', u'Double Kick', u'Mega Kick',  # 21
    u'Jump Kick', u'Rolling Kick', u'Sand Attack', u'Headbutt',
    u'Horn Attack',
    u'Fury Attack', u'Horn Drill', u'Tackle', u'Body Slam', u'Wrap',  # 31
    u'Take Down', u'Thrash', u'Double-Edge', u'Tail Whip', u'Poison Sting',
    u'Twineedle', u'Pin Missile', u'Leer', u'Bite', u'Growl',  # 41
    u'Roar', u'Sing', u'Supersonic', u'Sonic Boom', u'Disable',
    u'Acid', u'Ember', u'Flamethrower', u'Mist', u'Water Gun',  # 51
    u'Hydro Pump', u'Surf', u'Ice Beam', u'Blizzard', u'Psybeam',
    u'Bubble Beam', u'Aurora Beam', u'Hyper Beam', u'Peck', u'Drill Peck',  # 61
    u'Submission', u'Low Kick', u'Counter', u'Seismic Toss', u'Strength',
    u'Absorb', u'Mega Drain', u'Leech Seed', u'Growth', u'Razor Leaf',  # 71
    u'Solar Beam', u'Poison Powder', u'Stun Spore', u'Sleep Powder',
    u'Petal Dance',
    u'String Shot', u'Dragon Rage', u'Fire Spin', u'Thunder Shock',  # 81
    u'Thunderbolt', u'Thunder Wave', u'Thunder', u'Rock Throw',
    u'Earthquake', u'Fissure',
    u'Dig', u'Toxic', u'Confusion', u'Psychic', u'Hypnosis',  # 91
    u'Meditate', u'Agility', u'Quick Attack', u'Rage', u'Teleport',
    u'Night Shade', u'Mimic', u'Screech', u'Double Team', u'Recover',  # 101
    u'Harden', u'Minimize', u'Smokescreen', u'Confuse Ray', u'Withdraw',
    u'Defense Curl', u'Barrier', u'Light Screen', u'Haze', u'Reflect',  # 111
    u'Focus Energy', u'Bide', u'Metronome', u'Mirror Move',
    u'Self-Destruct',
    u'Egg Bomb', u'Lick', u'Smog', u'Sludge', u'Bone Club',  # 121
    u'Fire Blast', u'Waterfall', u'Clamp', u'Swift', u'Skull Bash',
    u'Spike Cannon', u'Constrict', u'Amnesia', u'Kinesis', u'Soft-Boiled',  # 131
    u'High Jump Kick', u'Glare', u'Dream Eater', u'Poison Gas', u'Barrage',
    u'Leech Life', u'Lovely Kiss', u'Sky Attack', u'Transform', u'Bubble',  # 141
    u'Dizzy Punch', u'Spore', u'Flash', u'Psywave', u'Splash',
    u'Acid Armor', u'Crabhammer', u'Explosion', u'Fury Swipes',  # 151
    u'Bonemerang', u'Rest', u'Rock Slide', u'Hyper Fang', u'Sharpen',
    u'Conversion',
    u'Tri Attack', u'Super Fang', u'Slash', u'Substitute', u'Struggle',  # 161
    u'Sketch', u'Triple Kick', u'Thief', u'Spider Web', u'Mind Reader',
    u'Nightmare', u'Flame Wheel', u'Snore', u'Curse', u'Flail',  # 171
    u'Conversion 2', u'Aeroblast', u'Cotton Spore', u'Reversal', u'Spite',
    u'Powder Snow', u'Protect', u'Mach Punch', u'Scary Face',  # 181
    u'Feint Attack', u'Sweet Kiss', u'Belly Drum', u'Sludge Bomb',
    u'Mud-Slap', u'Octazooka',
    u'Spikes', u'Zap Cannon', u'Foresight', u'Destiny Bond',  # 191
    u'Perish Song', u'Icy Wind', u'Detect', u'Bone Rush', u'Lock-On',
    u'Outrage',
    u'Sandstorm', u'Giga Drain', u'Endure', u'Charm', u'Rollout',  # 201
    u'False Swipe', u'Swagger', u'Milk Drink', u'Spark', u'Fury Cutter',
    u'Steel Wing', u'Mean Look', u'Attract', u'Sleep Talk', u'Heal Bell',  # 211
    u'Return', u'Present', u'Frustration', u'Safeguard', u'Pain Split',
    u'Sacred Fire', u'Magnitude', u'Dynamic Punch', u'Megahorn',  # 221
    u'Dragon Breath', u'Baton Pass', u'Encore', u'Pursuit', u'Rapid Spin',
    u'Sweet Scent',
    u'Iron Tail', u'Metal Claw', u'Vital Throw', u'Morning Sun',  # 231
    u'Synthesis', u'Moonlight', u'Hidden Power', u'Cross Chop', u'Twister',
    u'Rain Dance',
    u'Sunny Day', u'Crunch', u'Mirror Coat', u'Psych Up', u'Extreme Speed',  # 241
    u'Ancient Power', u'Shadow Ball', u'Future Sight', u'Rock Smash',
    u'Whirlpool',
    u'Beat Up', u'Fake Out', u'Uproar', u'Stockpile', u'Spit Up',  # 251
    u'Swallow', u'Heat Wave', u'Hail', u'Torment', u'Flatter',
    u'Will-O-Wisp', u'Memento', u'Facade', u'Focus Punch',  # 261
    u'Smelling Salts', u'Follow Me', u'Nature Power', u'Charge', u'Taunt',
    u'Helping Hand',
    u'Trick', u'Role Play', u'Wish', u'Assist', u'Ingrain',  # 271
    u'Superpower', u'Magic Coat', u'Recycle', u'Revenge', u'Brick Break',
    u'Yawn', u'Knock Off', u'Endeavor', u'Eruption', u'Skill Swap',  # 281
    u'Imprison', u'Refresh', u'Grudge', u'Snatch', u'Secret Power',
    u'Dive', u'Arm Thrust', u'Camouflage', u'Tail Glow', u'Luster Purge',  # 291
    u'Mist Ball', u'Feather Dance', u'Teeter Dance', u'Blaze Kick',
    u'Mud Sport',
    u'Ice Ball', u'Needle Arm', u'Slack Off', u'Hyper Voice',  # 301
    u'Poison Fang', u'Crush Claw', u'Blast Burn', u'Hydro Cannon',
    u'Meteor Mash', u'Astonish',
    u'Weather Ball', u'Aromatherapy', u'Fake Tears', u'Air Cutter',  # 311
    u'Overheat', u'Odor Sleuth', u'Rock Tomb', u'Silver Wind',
    u'Metal Sound', u'Grass Whistle',
    u'Tickle', u'Cosmic Power', u'Water Spout', u'Signal Beam',  # 321
    u'Shadow Punch', u'Extrasensory', u'Sky Uppercut', u'Sand Tomb',
    u'Sheer Cold', u'Muddy Water',
    u'Bullet Seed', u'Aerial Ace', u'Icicle Spear', u'Iron Defense',  # 331
    u'Block', u'Howl', u'Dragon Claw', u'Frenzy Plant', u'Bulk Up',
    u'Bounce',
    u'Mud Shot', u'Poison Tail', u'Covet', u'Volt Tackle',  # 341
    u'Magical Leaf', u'Water Sport', u'Calm Mind', u'Leaf Blade',
    u'Dragon Dance', u'Rock Blast',
    u'Shock Wave', u'Water Pulse', u'Doom Desire', u'Psycho Boost',  # 351
    u'Roost', u'Gravity', u'Miracle Eye', u'Wake-Up Slap', u'Hammer Arm',
    u'Gyro Ball',
    u'Healing Wish', u'Brine', u'Natural Gift', u'Feint', u'Pluck',  # 361
    u'Tailwind', u'Acupressure', u'Metal Burst', u'U-turn',
    u'Close Combat',
    u'Payback', u'Assurance', u'Embargo', u'Fling', u'Psycho Shift',  # 371
    u'Trump Card', u'Heal Block', u'Wring Out', u'Power Trick',
    u'Gastro Acid',
    u'Lucky Chant', u'Me First', u'Copycat', u'Power Swap', u'Guard Swap',  # 381
    u'Punishment', u'Last Resort', u'Worry Seed', u'Sucker Punch',
    u'Toxic Spikes',
    u'Heart Swap', u'Aqua Ring', u'Magnet Rise', u'Flare Blitz',  # 391
    u'Force Palm', u'Aura Sphere', u'Rock Polish', u'Poison Jab',
    u'Dark Pulse', u'Night Slash',
    u'Aqua Tail', u'Seed Bomb', u'Air Slash', u'X-Scissor', u'Bug Buzz',  # 401
    u'Dragon Pulse', u'Dragon Rush', u'Power Gem', u'Drain Punch',
    u'Vacuum Wave',
    u'Focus Blast', u'Energy Ball', u'Brave Bird', u'Earth Power',  # 411
    u'Switcheroo', u'Giga Impact', u'Nasty Plot', u'Bullet Punch',
    u'Avalanche', u'Ice Shard',
    u'Shadow Claw', u'Thunder Fang', u'Ice Fang', u'Fire Fang',  # 421
    u'Shadow Sneak', u'Mud Bomb', u'Psycho Cut', u'Zen Headbutt',
    u'Mirror Shot', u'Flash Cannon',
    u'Rock Climb', u'Defog', u'Trick Room', u'Draco Meteor', u'Discharge',  # 431
    u'Lava Plume', u'Leaf Storm', u'Power Whip', u'Rock Wrecker',
    u'Cross Poison',
    u'Gunk Shot', u'Iron Head', u'Magnet Bomb', u'Stone Edge',  # 441
    u'Captivate', u'Stealth Rock', u'Grass Knot', u'Chatter', u'Judgment',
    u'Bug Bite',
    u'Charge Beam', u'Wood Hammer', u'Aqua Jet', u'Attack Order',  # 451
    u'Defend Order', u'Heal Order', u'Head Smash', u'Double Hit',
    u'Roar of Time', u'Spacial Rend',
    u'Lunar Dance', u'Crush Grip', u'Magma Storm', u'Dark Void',  # 461
    u'Seed Flare', u'Ominous Wind', u'Shadow Force', u'Hone Claws',
    u'Wide Guard', u'Guard Split',
    u'Power Split', u'Wonder Room', u'Psyshock', u'Venoshock',  # 471
    u'Autotomize', u'Rage Powder', u'Telekinesis', u'Magic Room',
    u'Smack Down', u'Storm Throw',
    u'Flame Burst', u'Sludge Wave', u'Quiver Dance', u'Heavy Slam',  # 481
    u'Synchronoise', u'Electro Ball', u'Soak', u'Flame Charge', u'Coil',
    u'Low Sweep',
    u'Acid Spray', u'Foul Play', u'Simple Beam', u'Entrainment',  # 491
    u'After You', u'Round', u'Echoed Voice', u'Chip Away', u'Clear Smog',
    u'Stored Power',
    u'Quick Guard', u'Ally Switch', u'Scald', u'Shell Smash',  # 501
    u'Heal Pulse', u'Hex', u'Sky Drop', u'Shift Gear', u'Circle Throw',
    u'Incinerate',
    u'Quash', u'Acrobatics', u'Reflect Type', u'Retaliate',  # 511
    u'Final Gambit', u'Bestow', u'Inferno', u'Water Pledge', u'Fire Pledge',
    u'Grass Pledge',
    u'Volt Switch', u'Struggle Bug', u'Bulldoze', u'Frost Breath',  # 521
    u'Dragon Tail', u'Work Up', u'Electroweb', u'Wild Charge', u'Drill Run',
    u'Dual Chop',
    u'Heart Stamp', u'Horn Leech', u'Sacred Sword', u'Razor Shell',  # 531
    u'Heat Crash', u'Leaf Tornado', u'Steamroller', u'Cotton Guard',
    u'Night Daze', u'Psystrike',
    u'Tail Slap', u'Hurricane', u'Head Charge', u'Gear Grind',  # 541
    u'Searing Shot', u'Techno Blast', u'Relic Song', u'Secret Sword',
    u'Glaciate', u'Bolt Strike',
    u'Blue Flare', u'Fiery Dance', u'Freeze Shock', u'Ice Burn', u'Snarl',  # 551
    u'Icicle Crash', u'V-create', u'Fusion Flare', u'Fusion Bolt',
    u'Flying Press',
    u'Mat Block', u'Belch', u'Rototiller', u'Sticky Web', u'Fell Stinger',  # 561
    u'Phantom Force', u'Trick-or-Treat', u'Noble Roar', u'Ion Deluge',
    u'Parabolic Charge',
    u"Forest's Curse", u'Petal Blizzard', u'Freeze-Dry',  # 571
    u'Disarming Voice', u'Parting Shot', u'Topsy-Turvy', u'Draining Kiss',
    u'Crafty Shield', u'Flower Shield', u'Grassy Terrain',
    u'Misty Terrain', u'Electrify', u'Play Rough', u'Fairy Wind',  # 581
    u'Moonblast', u'Boomburst', u'Fairy Lock', u"King's Shield",
    u'Play Nice', u'Confide',
    u'Diamond Storm', u'Steam Eruption', u'Hyperspace Hole',  # 591
    u'Water Shuriken', u'Mystical Fire', u'Spiky Shield', u'Aromatic Mist',
    u'Eerie Impulse', u'Venom Drench', u'Powder',
    u'Geomancy', u'Magnetic Flux', u'Happy Hour', u'Electric Terrain',  # 601
    u'Dazzling Gleam', u'Celebrate', u'Hold Hands', u'Baby-Doll Eyes',
    u'Nuzzle', u'Hold Back',
    u'Infestation', u'Power-Up Punch', u'Oblivion Wing',  # 611
    u'Thousand Arrows', u'Thousand Waves', u"Land's Wrath",
    u'Light of Ruin', u'Origin Pulse', u'Precipice Blades',
    u'Dragon Ascent',
    u'Hyperspace Fury',  # 621
    u'Breakneck Blitz (Physical)', u'Breakneck Blitz (Special)',
    u'All-Out Pummeling (Physical)', u'All-Out Pummeling (Special)',
    u'Supersonic Skystrike (Physical)', u'Supersonic Skystrike (Special)',
    u'Acid Downpour (Physical)', u'Acid Downpour (Special)',
    u'Tectonic Rage (Physical)',
    u'Tectonic Rage (Special)',  # 631
    u'Continental Crush (Physical)', u'Continental Crush (Special)',
    u'Savage Spin-Out (Physical)', u'Savage Spin-Out (Special)',
    u'Never-Ending Nightmare (Physical)',
    u'Never-Ending Nightmare (Special)',
    u'Corkscrew Crash (Physical)', u'Corkscrew Crash (Special)',
    u'Inferno Overdrive (Physical)',
    u'Inferno Overdrive (Special)',  # 641
    u'Hydro Vortex (Physical)', u'Hydro Vortex (Special)',
    u'Bloom Doom (Physical)', u'Bloom Doom (Special)',
    u'Gigavolt Havoc (Physical)', u'Gigavolt Havoc (Special)',
    u'Shattered Psyche (Physical)', u'Shattered Psyche (Special)',
    u'Subzero Slammer (Physical)',
    u'Subzero Slammer (Special)',  # 651
    u'Devastating Drake (Physical)', u'Devastating Drake (Special)',
    u'Black Hole Eclipse (Physical)', u'Black Hole Eclipse (Special)',
    u'Twinkle Tackle (Physical)', u'Twinkle Tackle (Special)',
    u'Catastropika', u'Shore Up', u'First Impression',
    u'Baneful Bunker', u'Spirit Shackle', u'Darkest Lariat',  # 661
    u'Sparkling Aria', u'Ice Hammer', u'Floral Healing',
    u'High Horsepower', u'Strength Sap', u'Solar Blade', u'Leafage',
    u'Spotlight', u'Toxic Thread', u'Laser Focus', u'Gear Up',  # 671
    u'Throat Chop', u'Pollen Puff', u'Anchor Shot', u'Psychic Terrain',
    u'Lunge', u'Fire Lash',
    u'Power Trip', u'Burn Up', u'Speed Swap', u'Smart Strike', u'Purify',  # 681
    u'Revelation Dance', u'Core Enforcer', u'Trop Kick', u'Instruct',
    u'Beak Blast',
    u'Clanging Scales', u'Dragon Hammer', u'Brutal Swing',  # 691
    u'Aurora Veil', u'Sinister Arrow Raid', u'Malicious Moonsault',
    u'Oceanic Operetta', u'Guardian of Alola',
    u'Soul-Stealing 7-Star Strike', u'Stoked Sparksurfer',
    u'Pulverizing Pancake', u'Extreme Evoboost', u'Genesis Supernova',  # 701
    u'Shell Trap', u'Fleur Cannon', u'Psychic Fangs', u'Stomping Tantrum',
    u'Shadow Bone', u'Accelerock', u'Liquidation',
    u'Prismatic Laser', u'Spectral Thief', u'Sunsteel Strike',  # 711
    u'Moongeist Beam', u'Tearful Look', u'Zing Zap', u"Nature's Madness",
    u'Multi-Attack', u'10,000,000 Volt Thunderbolt', u'Mind Blown',
    u'Plasma Fists', u'Photon Geyser', u'Light That Burns the Sky',  # 721
    u'Searing Sunraze Smash', u'Menacing Moonraze Maelstrom',
    u"Let's Snuggle Forever", u'Splintered Stormshards',
    u'Clangorous Soulblaze', u'Zippy Zap', u'Splishy Splash',
    u'Floaty Fall', u'Pika Papow', u'Bouncy Bubble', u'Buzzy Buzz',  # 731
    u'Sizzly Slide', u'Glitzy Glow', u'Baddy Bad', u'Sappy Seed',
    u'Freezy Frost', u'Sparkly Swirl',
    u'Veevee Volley', u'Double Iron Bash', u'Max Guard',  # 741
    u'Dynamax Cannon', u'Snipe Shot', u'Jaw Lock', u'Stuff Cheeks',
    u'No Retreat', u'Tar Shot', u'Magic Powder',
    u'Dragon Darts', u'Teatime', u'Octolock', u'Bolt Beak',  # 751
    u'Fishious Rend', u'Court Change', u'Max Flare', u'Max Flutterby',
    u'Max Lightning', u'Max Strike',
    u'Max Knuckle', u'Max Phantasm', u'Max Hailstorm', u'Max Ooze',  # 761
    u'Max Geyser', u'Max Airstream', u'Max Starfall', u'Max Wyrmwind',
    u'Max Mindstorm', u'Max Rockfall',
    u'Max Quake', u'Max Darkness', u'Max Overgrowth', u'Max Steelspike',  # 771
    u'Clangorous Soul', u'Body Press', u'Decorate', u'Drum Beating',
    u'Snap Trap', u'Pyro Ball',
    u'Behemoth Blade', u'Behemoth Bash', u'Aura Wheel',  # 781
    u'Breaking Swipe', u'Branch Poke', u'Overdrive', u'Apple Acid',
    u'Grav Apple', u'Spirit Break', u'Strange Steam',
    u'Life Dew', u'Obstruct', u'False Surrender', u'Meteor Assault',  # 791
    u'Eternabeam', u'Steel Beam', u'Expanding Force', u'Steel Roller',
    u'Scale Shot', u'Meteor Beam',
    u'Shell Side Arm', u'Misty Explosion', u'Grassy Glide',  # 801
    u'Rising Voltage', u'Terrain Pulse', u'Skitter Smack',
    u'Burning Jealousy', u'Lash Out', u'Poltergeist', u'Corrosive Gas',
    u'Coaching', u'Flip Turn', u'Triple Axel', u'Dual Wingbeat',  # 811
    u'Scorching Sands', u'Jungle Healing', u'Wicked Blow',
    u'Surging Strikes', u'Thunder Cage', u'Dragon Energy',
    u'Freezing Glare', u'Fiery Wrath', u'Thunderous Kick',  # 821
    u'Glacial Lance', u'Astral Barrage', u'Eerie Spell', u'Dire Claw',
    u'Psyshield Bash', u'Power Shift', u'Stone Axe',
    u'Springtide Storm', u'Mystical Power', u'Raging Fury',  # 831
    u'Wave Crash', u'Chloroblast', u'Mountain Gale', u'Victory Dance',
    u'Headlong Rush', u'Barb Barrage', u'Esper Wing',
    u'Bitter Malice', u'Shelter', u'Triple Arrows', u'Infernal Parade',  # 841
    u'Ceaseless Edge', u'Bleakwind Storm', u'Wildbolt Storm',
    u'Sandsear Storm', u'Lunar Blessing', u'Take Heart',
    u'Tera Blast', u'Silk Trap', u'Axe Kick', u'Last Respects',  # 851
    u'Lumina Crash', u'Order Up', u'Jet Punch', u'Spicy Extract',
    u'Spin Out', u'Population Bomb',
    u'Ice Spinner', u'Glaive Rush', u'Revival Blessing', u'Salt Cure',  # 861
    u'Triple Dive', u'Mortal Spin', u'Doodle', u'Fillet Away',
    u'Kowtow Cleave', u'Flower Trick',
    u'Torch Song', u'Aqua Step', u'Raging Bull', u'Make It Rain',  # 871
    u'Psyblade', u'Hydro Steam', u'Ruination', u'Collision Course',
    u'Electro Drift', u'Shed Tail',
    u'Chilly Reception', u'Tidy Up', u'Snowscape', u'Pounce',  # 881
    u'Trailblaze', u'Chilling Water', u'Hyper Drill', u'Twin Beam',
    u'Rage Fist', u'Armor Cannon',
    u'Bitter Blade', u'Double Shock', u'Gigaton Hammer', u'Comeuppance',  # 891
    u'Aqua Cutter', u'Blazing Torque', u'Wicked Torque', u'Noxious Torque',
    u'Combat Torque', u'Magical Torque',
    u'Blood Moon', u'Matcha Gotcha', u'Syrup Bomb', u'Ivy Cudgel',  # 901
    u'Electro Shot', u'Tera Starstorm', u'Fickle Beam', u'Burning Bulwark',
    u'Thunderclap', u'Mighty Cleave',
    u'Tachyon Cutter', u'Hard Press', u'Dragon Cheer', u'Alluring Voice',  # 911
    u'Temper Flare', u'Supercell Slam', u'Psychic Noise', u'Upper Hand',
    u'Malignant Chain',
)

ABILITIES = (
    u'None',
    u'Stench', u'Drizzle', u'Speed Boost', u'Battle Armor', u'Sturdy',  # 1
    u'Damp', u'Limber', u'Sand Veil', u'Static', u'Volt Absorb',
    u'Water Absorb', u'Oblivious', u'Cloud Nine', u'Compound Eyes',  # 11
    u'Insomnia', u'Color Change', u'Immunity', u'Flash Fire',
    u'Shield Dust', u'Own Tempo',
    u'Suction Cups', u'Intimidate', u'Shadow Tag', u'Rough Skin',  # 21
    u'Wonder Guard', u'Levitate', u'Effect Spore', u'Synchronize',
    u'Clear Body', u'Natural Cure',
    u'Lightning Rod', u'Serene Grace', u'Swift Swim', u'Chlorophyll',  # 31
    u'Illuminate', u'Trace', u'Huge Power', u'Poison Point',
    u'Inner Focus', u'Magma Armor',
    u'Water Veil', u'Magnet Pull', u'Soundproof', u'Rain Dish',  # 41
    u'Sand Stream', u'Pressure', u'Thick Fat', u'Early Bird',
    u'Flame Body', u'Run Away',
    u'Keen Eye', u'Hyper Cutter', u'Pickup', u'Truant', u'Hustle',  # 51
    u'Cute Charm', u'Plus', u'Minus', u'Forecast', u'Sticky Hold',
    u'Shed Skin', u'Guts', u'Marvel Scale', u'Liquid Ooze', u'Overgrow',  # 61
    u'Blaze', u'Torrent', u'Swarm', u'Rock Head', u'Drought',
    u'Arena Trap', u'Vital Spirit', u'White Smoke', u'Pure Power',  # 71
    u'Shell Armor', u'Air Lock', u'Tangled Feet', u'Motor Drive',
    u'Rivalry', u'Steadfast',
    u'Snow Cloak', u'Gluttony', u'Anger Point', u'Unburden',  # 81
    u'Heatproof', u'Simple', u'Dry Skin', u'Download', u'Iron Fist',
    u'Poison Heal',
    u'Adaptability', u'Skill Link', u'Hydration', u'Solar Power',  # 91
    u'Quick Feet', u'Normalize', u'Sniper', u'Magic Guard', u'No Guard',
    u'Stall',
    u'Technician', u'Leaf Guard', u'Klutz', u'Mold Breaker',  # 101
    u'Super Luck', u'Aftermath', u'Anticipation', u'Forewarn',
    u'Unaware', u'Tinted Lens',
    u'Filter', u'Slow Start', u'Scrappy', u'Storm Drain', u'Ice Body',  # 111
    u'Solid Rock', u'Snow Warning', u'Honey Gather', u'Frisk',
    u'Reckless',
    u'Multitype', u'Flower Gift', u'Bad Dreams', u'Pickpocket',  # 121
    u'Sheer Force', u'Contrary', u'Unnerve', u'Defiant', u'Defeatist',
    u'Cursed Body',
    u'Healer', u'Friend Guard', u'Weak Armor', u'Heavy Metal',  # 131
    u'Light Metal', u'Multiscale', u'Toxic Boost', u'Flare Boost',
    u'Harvest', u'Telepathy',
    u'Moody', u'Overcoat', u'Poison Touch', u'Regenerator', u'Big Pecks',  # 141
    u'Sand Rush', u'Wonder Skin', u'Analytic', u'Illusion', u'Imposter',
    u'Infiltrator', u'Mummy', u'Moxie', u'Justified', u'Rattled',  # 151
    u'Magic Bounce', u'Sap Sipper', u'Prankster', u'Sand Force',
    u'Iron Barbs',
    u'Zen Mode', u'Victory Star', u'Turboblaze', u'Teravolt',  # 161
    u'Aroma Veil', u'Flower Veil', u'Cheek Pouch', u'Protean', u'Fur Coat',
    u'Magician',
    u'Bulletproof', u'Competitive', u'Strong Jaw', u'Refrigerate',  # 171
    u'Sweet Veil', u'Stance Change', u'Gale Wings', u'Mega Launcher',
    u'Grass Pelt', u'Symbiosis',
    u'Tough Claws', u'Pixilate', u'Gooey', u'Aerilate', u'Parental Bond',  # 181
    u'Dark Aura', u'Fairy Aura', u'Aura Break', u'Primordial Sea',
    u'Desolate Land',
    u'Delta Stream', u'Stamina', u'Wimp Out', u'Emergency Exit',  # 191
    u'Water Compaction', u'Merciless', u'Shields Down', u'Stakeout',
    u'Water Bubble', u'Steelworker',
    u'Berserk', u'Slush Rush', u'Long Reach', u'Liquid Voice', u'Triage',  # 201
    u'Galvanize', u'Surge Surfer', u'Schooling', u'Disguise',
    u'Battle Bond',
    u'Power Construct', u'Corrosion', u'Comatose', u'Queenly Majesty',  # 211
    u'Innards Out', u'Dancer', u'Battery', u'Fluffy', u'Dazzling',
    u'Soul-Heart',
    u'Tangling Hair', u'Receiver', u'Power of Alchemy', u'Beast Boost',  # 221
    u'RKS System', u'Electric Surge', u'Psychic Surge', u'Misty Surge',
    u'Grassy Surge', u'Full Metal Body',
    u'Shadow Shield', u'Prism Armor', u'Neuroforce', u'Intrepid Sword',  # 231
    u'Dauntless Shield', u'Libero', u'Ball Fetch', u'Cotton Down',
    u'Propeller Tail', u'Mirror Armor',
    u'Gulp Missile', u'Stalwart', u'Steam Engine', u'Punk Rock',  # 241
    u'Sand Spit', u'Ice Scales', u'Ripen', u'Ice Face', u'Power Spot',
    u'Mimicry',
    u'Screen Cleaner', u'Steely Spirit', u'Perish Body',  # 251
    u'Wandering Spirit', u'Gorilla Tactics', u'Neutralizing Gas',
    u'Pastel Veil', u'Hunger Switch', u'Quick Draw', u'Unseen Fist',
    u'Curious Medicine', u'Transistor', u"Dragon's Maw",  # 261
    u'Chilling Neigh', u'Grim Neigh', u'As One (Glastrier)',
    u'As One (Spectrier)', u'Lingering Aroma', u'Seed Sower',
    u'Thermal Exchange',
    u'Anger Shell', u'Purifying Salt', u'Well-Baked Body', u'Wind Rider',  # 271
    u'Guard Dog', u'Rocky Payload', u'Wind Power', u'Zero to Hero',
    u'Commander', u'Electromorphosis',
    u'Protosynthesis', u'Quark Drive', u'Good as Gold',  # 281
    u'Vessel of Ruin', u'Sword of Ruin', u'Tablets of Ruin',
    u'Beads of Ruin', u'Orichalcum Pulse', u'Hadron Engine', u'Opportunist',
    u'Cud Chew', u'Sharpness', u'Supreme Overlord', u'Costar',  # 291
    u'Toxic Debris', u'Armor Tail', u'Earth Eater', u'Mycelium Might',
    u"Mind's Eye", u'Supersweet Syrup',
    u'Hospitality', u'Toxic Chain', u'Embody Aspect (Teal)',  # 301
    u'Embody Aspect (Hearthflame)', u'Embody Aspect (Wellspring)',
    u'Embody Aspect (Cornerstone)', u'Tera Shift', u'Tera Shell',
    u'Teraform Zero', u'Poison Puppeteer',
)
