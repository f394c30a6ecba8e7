"""Shared <Product> fixtures for the product facade tests."""

import pytest
from lxml import etree

from onixkit.product import Product

ISBN_IDENTIFIER = (
    "<ProductIdentifier><ProductIDType>15</ProductIDType>"
    "<IDValue>9780000000002</IDValue></ProductIdentifier>"
)

ONIX21_PRODUCT = """
<Product>
  <RecordReference>rec-21</RecordReference>
  <ProductIdentifier><ProductIDType>15</ProductIDType><IDValue>9780000000002</IDValue></ProductIdentifier>
  <ProductIdentifier><ProductIDType>03</ProductIDType><IDValue>9780000000019</IDValue></ProductIdentifier>
  <ProductForm>BB</ProductForm>
  <ProductFormDetail>B206</ProductFormDetail>
  <ProductFormFeature><ProductFormFeatureType>02</ProductFormFeatureType><ProductFormFeatureValue>BLK</ProductFormFeatureValue></ProductFormFeature>
  <EpubTechnicalProtection>00</EpubTechnicalProtection>
  <Series><TitleOfSeries>&lt;![CDATA[Great Series]]&gt;</TitleOfSeries><NumberWithinSeries>3</NumberWithinSeries></Series>
  <Title><TitleType>01</TitleType><TitleText>The Book</TitleText><Subtitle>A Novel</Subtitle></Title>
  <Title><TitleType>05</TitleType><TitleText>Book</TitleText></Title>
  <Contributor><SequenceNumber>1</SequenceNumber><ContributorRole>A01</ContributorRole><PersonNameInverted>Doe, Jane</PersonNameInverted><BiographicalNote>&lt;![CDATA[Jane writes.]]&gt;</BiographicalNote></Contributor>
  <Contributor><SequenceNumber>2</SequenceNumber><ContributorRole>B01</ContributorRole><PersonName>John Smith</PersonName></Contributor>
  <Contributor><SequenceNumber>3</SequenceNumber><PersonName>No Role</PersonName></Contributor>
  <EditionTypeCode>REV</EditionTypeCode>
  <Language><LanguageRole>02</LanguageRole><LanguageCode>ger</LanguageCode></Language>
  <Language><LanguageRole>01</LanguageRole><LanguageCode>eng</LanguageCode></Language>
  <NumberOfPages>320</NumberOfPages>
  <BASICMainSubject>FIC000000</BASICMainSubject>
  <Subject><SubjectSchemeIdentifier>10</SubjectSchemeIdentifier><SubjectCode>FIC019000</SubjectCode></Subject>
  <Subject><SubjectSchemeIdentifier>10</SubjectSchemeIdentifier><SubjectCode>FIC044000</SubjectCode></Subject>
  <Subject><SubjectSchemeIdentifier>20</SubjectSchemeIdentifier><SubjectHeadingText>love; loss</SubjectHeadingText></Subject>
  <AudienceCode>01</AudienceCode>
  <AudienceRange><AudienceRangeQualifier>17</AudienceRangeQualifier><AudienceRangePrecision>03</AudienceRangePrecision><AudienceRangeValue>12</AudienceRangeValue><AudienceRangePrecision>04</AudienceRangePrecision><AudienceRangeValue>18</AudienceRangeValue></AudienceRange>
  <OtherText><TextTypeCode>01</TextTypeCode><TextFormat>06</TextFormat><Text>Main text</Text></OtherText>
  <OtherText><TextTypeCode>08</TextTypeCode><TextFormat>06</TextFormat><Text>Great!</Text><TextAuthor>A Critic</TextAuthor><TextSourceTitle>The Paper</TextSourceTitle></OtherText>
  <OtherText><TextTypeCode>13</TextTypeCode><Text>&lt;![CDATA[Bio text]]&gt;</Text></OtherText>
  <OtherText><TextTypeCode>09</TextTypeCode><Text>Headline</Text></OtherText>
  <OtherText><TextTypeCode>18</TextTypeCode><Text>Back cover</Text></OtherText>
  <OtherText><TextTypeCode>23</TextTypeCode><Text>Chapter one</Text></OtherText>
  <MediaFile><MediaFileTypeCode>06</MediaFileTypeCode><MediaFileFormatCode>03</MediaFileFormatCode><MediaFileLinkTypeCode>01</MediaFileLinkTypeCode><MediaFileLink>http://x/author.jpg</MediaFileLink></MediaFile>
  <MediaFile><MediaFileTypeCode>04</MediaFileTypeCode><MediaFileFormatCode>03</MediaFileFormatCode><MediaFileLinkTypeCode>01</MediaFileLinkTypeCode><MediaFileLink>http://x/y.jpg</MediaFileLink><MediaFileDate>20120315</MediaFileDate></MediaFile>
  <Imprint><ImprintName>Imprint Books</ImprintName></Imprint>
  <Publisher><PublishingRole>01</PublishingRole><PublisherName>Pub House</PublisherName></Publisher>
  <PublishingStatus>04</PublishingStatus>
  <PublicationDate>20120401</PublicationDate>
  <CopyrightStatement><CopyrightYear>2011</CopyrightYear><CopyrightOwner><PersonName>Jane Doe</PersonName></CopyrightOwner></CopyrightStatement>
  <SalesRights><SalesRightsType>01</SalesRightsType><RightsCountry>US</RightsCountry></SalesRights>
  <SalesRights><SalesRightsType>03</SalesRightsType><RightsCountry>CA UK</RightsCountry></SalesRights>
  <SalesRights><SalesRightsType>02</SalesRightsType><RightsCountry>AU</RightsCountry></SalesRights>
  <Measure><MeasureTypeCode>01</MeasureTypeCode><Measurement>23.5</Measurement><MeasureUnitCode>cm</MeasureUnitCode></Measure>
  <Measure><MeasureTypeCode>08</MeasureTypeCode><Measurement>450</Measurement><MeasureUnitCode>gr</MeasureUnitCode></Measure>
  <Measure><MeasureTypeCode>05</MeasureTypeCode><Measurement>1</Measurement><MeasureUnitCode>cm</MeasureUnitCode></Measure>
  <Prize><PrizeName>Big Prize</PrizeName><PrizeYear>2012</PrizeYear><PrizeCountry>US</PrizeCountry><PrizeCode>01</PrizeCode></Prize>
  <SupplyDetail>
    <SupplierName>Dist</SupplierName>
    <AvailabilityCode>IP</AvailabilityCode>
    <ProductAvailability>21</ProductAvailability>
    <OnSaleDate>20120401</OnSaleDate>
    <Stock><LocationName>Main Warehouse</LocationName><OnHand>10</OnHand></Stock>
    <Price><PriceTypeCode>01</PriceTypeCode><PriceAmount>19.99</PriceAmount><CurrencyCode>USD</CurrencyCode></Price>
    <Price><PriceAmount>24.99</PriceAmount><CurrencyCode>CAD</CurrencyCode><PriceEffectiveFrom>20120101</PriceEffectiveFrom></Price>
  </SupplyDetail>
</Product>
"""

ONIX30_PRODUCT = """
<Product>
  <RecordReference>rec-30</RecordReference>
  <ProductIdentifier><ProductIDType>15</ProductIDType><IDValue>9781111111113</IDValue></ProductIdentifier>
  <NumberOfPages>999</NumberOfPages>
  <DescriptiveDetail>
    <ProductComposition>00</ProductComposition>
    <ProductForm>ED</ProductForm>
    <ProductFormDetail>E101</ProductFormDetail>
    <ProductFormFeature><ProductFormFeatureType>09</ProductFormFeatureType><ProductFormFeatureValue>0</ProductFormFeatureValue></ProductFormFeature>
    <EpubTechnicalProtection>03</EpubTechnicalProtection>
    <Measure><MeasureType>01</MeasureType><Measurement>20</Measurement><MeasureUnitCode>cm</MeasureUnitCode></Measure>
    <TitleDetail><TitleType>01</TitleType><TitleElement><TitleElementLevel>01</TitleElementLevel><TitlePrefix>The</TitlePrefix><TitleWithoutPrefix>Third Book</TitleWithoutPrefix><Subtitle>Stories</Subtitle></TitleElement></TitleDetail>
    <Contributor><SequenceNumber>1</SequenceNumber><ContributorRole>A01</ContributorRole><PersonName>Ann Author</PersonName></Contributor>
    <Contributor><SequenceNumber>2</SequenceNumber><ContributorRole>B06</ContributorRole><CorporateName>Translators Ltd</CorporateName></Contributor>
    <EditionType>ABR</EditionType>
    <Language><LanguageRole>01</LanguageRole><LanguageCode>fre</LanguageCode></Language>
    <Subject><MainSubject/><SubjectSchemeIdentifier>10</SubjectSchemeIdentifier><SubjectCode>FIC029000</SubjectCode></Subject>
    <Subject><SubjectSchemeIdentifier>10</SubjectSchemeIdentifier><SubjectCode>FIC019000</SubjectCode></Subject>
    <Subject><SubjectSchemeIdentifier>10</SubjectSchemeIdentifier><SubjectCode>FIC044000</SubjectCode></Subject>
    <Subject><SubjectSchemeIdentifier>20</SubjectSchemeIdentifier><SubjectHeadingText>short stories</SubjectHeadingText></Subject>
    <AudienceRange><AudienceRangeQualifier>17</AudienceRangeQualifier><AudienceRangePrecision>01</AudienceRangePrecision><AudienceRangeValue>10</AudienceRangeValue></AudienceRange>
  </DescriptiveDetail>
  <CollateralDetail>
    <TextContent><TextType>03</TextType><ContentAudience>00</ContentAudience><Text textformat="05"><p>Rich <b>description</b></p></Text></TextContent>
    <TextContent><TextType>10</TextType><ContentAudience>00</ContentAudience><Text>Headline!</Text></TextContent>
    <TextContent><TextType>06</TextType><ContentAudience>00</ContentAudience><Text>Loved it</Text><SourceTitle>Le Journal</SourceTitle></TextContent>
    <Prize><PrizeName>Prix</PrizeName><PrizeYear>2020</PrizeYear><PrizeStatement>&lt;![CDATA[Winner]]&gt;</PrizeStatement></Prize>
  </CollateralDetail>
  <PublishingDetail>
    <Imprint><ImprintName>Imprint Three</ImprintName></Imprint>
    <Publisher><PublishingRole>01</PublishingRole><PublisherName>Three House</PublisherName><Website><WebsiteLink>http://three.example</WebsiteLink></Website></Publisher>
    <PublishingStatus>02</PublishingStatus>
    <PublishingDate><PublishingDateRole>01</PublishingDateRole><Date>20210105</Date></PublishingDate>
    <CopyrightStatement><CopyrightYear>2020</CopyrightYear><CopyrightOwner><PersonName>Ann Author</PersonName></CopyrightOwner><CopyrightOwner><CorporateName>Three House</CorporateName></CopyrightOwner></CopyrightStatement>
    <SalesRights><SalesRightsType>01</SalesRightsType><Territory><CountriesIncluded>FR BE</CountriesIncluded></Territory></SalesRights>
  </PublishingDetail>
  <ProductSupply>
    <SupplyDetail>
      <Supplier><SupplierRole>01</SupplierRole><SupplierName>Dist</SupplierName></Supplier>
      <ProductAvailability>20</ProductAvailability>
      <SupplyDate><SupplyDateRole>08</SupplyDateRole><Date>20210110</Date></SupplyDate>
      <Price><PriceType>02</PriceType><PriceAmount>9.99</PriceAmount><CurrencyCode>EUR</CurrencyCode></Price>
    </SupplyDetail>
  </ProductSupply>
</Product>
"""


@pytest.fixture
def onix21_root():
    return etree.fromstring(ONIX21_PRODUCT)


@pytest.fixture
def onix21_product(onix21_root):
    return Product(onix21_root, "2.1")


@pytest.fixture
def onix30_product():
    return Product(etree.fromstring(ONIX30_PRODUCT), "3.0")


@pytest.fixture
def make_product():
    """Factory: wrap a body in <Product> with one ISBN identifier."""

    def _make(body: str, version: str = "2.1", with_identifier: bool = True) -> Product:
        identifier = ISBN_IDENTIFIER if with_identifier else ""
        return Product(etree.fromstring(f"<Product>{identifier}{body}</Product>"), version)

    return _make
